from .json_handler import JSONOutputHandler

__all__ = ['JSONOutputHandler']
