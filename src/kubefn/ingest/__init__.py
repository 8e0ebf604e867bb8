from .loader import load_function_list, parse_function_list

__all__ = ["load_function_list", "parse_function_list"]
