from typing import Optional


class TextField:
    """Editable city name field. ``text`` is None until something is typed."""

    def __init__(self, text: Optional[str] = None):
        self.text = text


class ResultLabel:
    """One-line label that shows the lookup result."""

    def __init__(self, text: str = ""):
        self.text = text


class NoticePresenter:
    """Shows one notice at a time; a new notice replaces the previous one."""

    def __init__(self):
        self.latest: Optional[str] = None
        self.presented = 0

    def present(self, message: str):
        self.latest = message
        self.presented += 1
