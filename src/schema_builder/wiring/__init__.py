from .instances import DefaultInstanceProvider, FieldResolver, InstanceProvider, MappingInstanceProvider

__all__ = ["DefaultInstanceProvider", "FieldResolver", "InstanceProvider", "MappingInstanceProvider"]
