# profiles/utils/flash.py


class FlashStore:
    """
    One-shot values kept in the session until the next page render.

    `set_once` stores a value; `consume_once` returns it and removes it, so a
    second read yields the default.
    """

    def __init__(self, session):
        self.session = session

    def set_once(self, key: str, value) -> None:
        self.session[key] = str(value)

    def consume_once(self, key: str, default=None):
        return self.session.pop(key, default)
