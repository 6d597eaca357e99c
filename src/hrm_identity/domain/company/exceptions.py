"""Company domain exceptions."""


class CompanyNotFoundError(Exception):
    """Company not found."""

    def __init__(self, company_id: str) -> None:
        self.company_id = company_id
        super().__init__(f"Company not found: {company_id}")
