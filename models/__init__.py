from .company_record import CompanyFields, CompanyRecord, EDITABLE_FIELDS

__all__ = [
    "CompanyFields",
    "CompanyRecord",
    "EDITABLE_FIELDS",
]
