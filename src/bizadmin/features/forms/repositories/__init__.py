from .form_list_source import FORM_TABLES, FormListSource

__all__ = ["FORM_TABLES", "FormListSource"]
