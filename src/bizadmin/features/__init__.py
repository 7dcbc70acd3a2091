"""Feature modules of bizadmin."""
