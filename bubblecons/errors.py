def _message(m):
    @classmethod
    def builder(cls, *args, **format_vars):
        return cls(m.format(**format_vars), *args)
    return builder

class BubbleconsError(Exception):
    pass


class EmptyListError(BubbleconsError, IndexError):
    empty = _message('{attr} of empty list')


class ParseError(BubbleconsError):
    def __init__(self, message, position):
        super().__init__(message)
        self.position = position

    not_an_int = _message('Expected an integer, got {value!r}')

    def get_info(self, filename):
        # Mimic "file:position: message" style compiler errors
        return f'{filename}:{self.position}: {self}'
