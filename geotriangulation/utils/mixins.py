"""Utility mixin classes"""

__all__ = ['FrozenMixin']


class FrozenMixin:  # pylint: disable=too-few-public-methods
    """
    Makes instances read-only once _freeze() has been called, typically as the last
    statement of __init__.
    """
    _frozen: bool = False

    def __setattr__(self, key, value):
        if self._frozen:
            raise AttributeError(f'{self.__class__.__name__} is immutable')

        super().__setattr__(key, value)

    def __delattr__(self, item):
        if self._frozen:
            raise AttributeError(f'{self.__class__.__name__} is immutable')

        super().__delattr__(item)

    def _freeze(self):
        object.__setattr__(self, '_frozen', True)
