"""Failures raised by intern search and ingestion.

Everything below ``InternshipError`` is rejected before any write except
``PersistenceError``, which means the atomic write itself failed and
nothing from the batch was stored.
"""


class InternshipError(Exception):
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def details(self):
        return {}


class InvalidQueryError(InternshipError):
    pass


class InvalidPaginationError(InternshipError):
    pass


class MalformedRecordError(InternshipError):
    def __init__(self, message, row=None, field=None):
        super().__init__(message)
        self.row = row
        self.field = field

    def details(self):
        return {"row": self.row, "field": self.field}


class EmptyBatchError(InternshipError):
    def __init__(self, message="The batch contains no interns."):
        super().__init__(message)


class DuplicateInBatchError(InternshipError):
    def __init__(self, emails):
        super().__init__("Duplicate emails in batch: " + ", ".join(emails))
        self.emails = list(emails)

    def details(self):
        return {"emails": self.emails}


class AlreadyExistsError(InternshipError):
    status_code = 409

    def __init__(self, emails):
        super().__init__("Interns already exist for: " + ", ".join(emails))
        self.emails = list(emails)

    def details(self):
        return {"emails": self.emails}


class DuplicateInternError(InternshipError):
    status_code = 409

    def __init__(self, email):
        super().__init__(f"An intern with email {email} already exists.")
        self.email = email

    def details(self):
        return {"email": self.email}


class PersistenceError(InternshipError):
    status_code = 503
