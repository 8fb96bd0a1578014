"""
Исключения для домена Parsing.

Детекторы и сборщик ценника исключений не бросают. Эти ошибки возникают
только на файловом уровне (чтение транскрипций, запись результатов).
"""


class ParsingError(Exception):
    """Базовое исключение для ошибок домена Parsing."""

    def __init__(self, message: str, component: str = None, original_error: Exception = None):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Parsing Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg



class ParsingFileNotFoundError(ParsingError):
    """Файл не найден в домене Parsing."""
    pass


class ParsingFileWriteError(ParsingError):
    """Ошибка записи файла в домене Parsing."""
    pass


class ParsingDataFormatError(ParsingError):
    """Ошибка формата данных (файл транскрипции не является UTF-8 текстом)."""
    pass
