from . import create, delete, validate

__all__ = ['create', 'delete', 'validate']
