class TickError(Exception):
    pass


class ValidationError(TickError):
    pass


class ParseError(TickError):
    pass


class MissingArgumentError(ParseError):
    pass


class InvalidFormatError(ParseError):
    pass


class UnknownCommandError(ParseError):
    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(f"unknown command '{keyword}'")


class OutOfRangeError(TickError):
    def __init__(self, position: int, size: int):
        self.position = position
        self.size = size
        if size == 0:
            note = "the list is empty"
        else:
            note = f"pick a number from 1 to {size}"
        super().__init__(f"no task {position}: {note}")
