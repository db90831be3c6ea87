class LedgerError(Exception):
    """Base error for anything the balance engine refuses to compute."""


class DegenerateInputError(LedgerError):
    pass


class UnknownMemberError(LedgerError):
    def __init__(self, member_id: str):
        self.member_id = member_id
        super().__init__(f"Transaction references unknown member '{member_id}'")
