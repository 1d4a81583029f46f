"""Constants for Country model field names"""


class CountryFields:
    """Public (wire) field names of a country"""
    COUNTRY_ID = "countryId"
    COUNTRY_NAME = "countryName"
