"""Errors raised by the query engine and translated to HTTP responses."""


class FilmsApiError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message}


class NotFound(FilmsApiError):
    status_code = 404

    def __init__(self, film_id):
        super().__init__(f"Film {film_id} not found")
        self.film_id = film_id


class InvalidParameter(FilmsApiError):
    status_code = 400

    def __init__(self, name, value, message=None):
        super().__init__(message or f"Invalid value for parameter '{name}': {value!r}")
        self.name = name
        self.value = value


class MissingParameter(InvalidParameter):
    def __init__(self, name):
        super().__init__(name, None, f"Missing required parameter '{name}'")
