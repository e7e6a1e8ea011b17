# frontend/app/errors.py
# Exceptions raised by the workflow and converted into status messages by handlers.py.


class DrinkMailerError(Exception):
    """Base class for every user-facing failure of the recipient/send workflow."""

    default_message = "操作失敗"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class FetchError(DrinkMailerError):
    """The recipient list could not be retrieved or parsed."""

    default_message = "讀取名單失敗"


class FormValidationError(DrinkMailerError):
    """One or more form fields failed validation. `field_errors` maps field name -> message."""

    default_message = "表單欄位有誤"

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = dict(field_errors)
        super().__init__(self.default_message)


class NoRecipientsSelected(DrinkMailerError):
    default_message = "請至少勾選一位收件人"


class SendError(DrinkMailerError):
    """The backend reported a failure, or the send request itself failed."""

    default_message = "寄送失敗"
