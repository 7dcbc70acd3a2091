from .templates import SUBJECT, render_reset_html, render_reset_text, reset_link

__all__ = ["SUBJECT", "render_reset_html", "render_reset_text", "reset_link"]
