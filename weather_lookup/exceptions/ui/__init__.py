from weather_lookup.exceptions.ui.missing_ui_binding_error import MissingUIBindingError

__all__ = ["MissingUIBindingError"]
