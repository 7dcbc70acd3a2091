"""Core building blocks shared by all bizadmin features."""
