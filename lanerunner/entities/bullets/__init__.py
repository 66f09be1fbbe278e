from .rock import Rock

__all__ = ['Rock']
