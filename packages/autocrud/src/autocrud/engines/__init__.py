from autocrud.engines.registered_type import RegisteredType, register_type

__all__ = ["RegisteredType", "register_type"]
