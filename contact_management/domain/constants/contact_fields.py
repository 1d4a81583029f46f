"""Constants for Contact model field names"""


class ContactFields:
    """Public (wire) field names of a contact"""
    CONTACT_ID = "contactId"
    CONTACT_NAME = "contactName"
    COMPANY_ID = "companyId"
    COUNTRY_ID = "countryId"
