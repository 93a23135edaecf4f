from restful_crud.utils.fields import get_data_value, normalize_key, stringify_value

__all__ = ["get_data_value", "normalize_key", "stringify_value"]
