"""Constants for Company model field names"""


class CompanyFields:
    """Public (wire) field names of a company"""
    COMPANY_ID = "companyId"
    COMPANY_NAME = "companyName"

    # Pagination query parameters
    PAGE_NUMBER = "pageNumber"
    PAGE_SIZE = "pageSize"
