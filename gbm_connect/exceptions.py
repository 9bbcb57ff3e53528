"""GBM Connect — Помилки"""


class GBMConnectError(Exception):
    """Базова помилка GBM Connect"""


class PatientNotFoundError(GBMConnectError):
    """У користувача немає збереженого клінічного профілю"""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"No patient record for user '{user_id}'")
