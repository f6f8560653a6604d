"""
Licensing constants — driving-licence length rules per country.

Lengths count characters after spaces and hyphens are removed.
"""

# country code -> (min_length, max_length, country_name)
LICENSE_LENGTHS: dict[str, tuple[int, int, str]] = {
    # North America
    "US": (8, 16, "United States"),
    "CA": (8, 15, "Canada"),
    "MX": (9, 13, "Mexico"),
    # Europe
    "GB": (16, 16, "United Kingdom"),
    "DE": (11, 11, "Germany"),
    "FR": (12, 15, "France"),
    "IT": (10, 10, "Italy"),
    "ES": (9, 9, "Spain"),
    "NL": (10, 10, "Netherlands"),
    "BE": (10, 10, "Belgium"),
    "AT": (8, 10, "Austria"),
    "CH": (6, 12, "Switzerland"),
    "PL": (9, 14, "Poland"),
    "SE": (10, 10, "Sweden"),
    "NO": (11, 11, "Norway"),
    "DK": (8, 10, "Denmark"),
    "FI": (8, 12, "Finland"),
    "IE": (8, 14, "Ireland"),
    "PT": (8, 12, "Portugal"),
    "GR": (7, 10, "Greece"),
    "CZ": (8, 10, "Czech Republic"),
    "HU": (8, 10, "Hungary"),
    "RO": (8, 12, "Romania"),
    "BG": (9, 10, "Bulgaria"),
    "RU": (10, 10, "Russia"),
    "UA": (9, 9, "Ukraine"),
    "TR": (11, 11, "Turkey"),
    # Asia
    "PK": (13, 15, "Pakistan"),
    "IN": (15, 16, "India"),
    "CN": (18, 18, "China"),
    "JP": (12, 12, "Japan"),
    "KR": (10, 12, "South Korea"),
    "TH": (8, 8, "Thailand"),
    "MY": (8, 14, "Malaysia"),
    "SG": (9, 9, "Singapore"),
    "PH": (11, 13, "Philippines"),
    "ID": (12, 16, "Indonesia"),
    "VN": (12, 12, "Vietnam"),
    "BD": (15, 15, "Bangladesh"),
    "LK": (8, 10, "Sri Lanka"),
    "NP": (9, 12, "Nepal"),
    # Middle East
    "AE": (7, 10, "UAE"),
    "SA": (10, 10, "Saudi Arabia"),
    "QA": (11, 11, "Qatar"),
    "KW": (12, 12, "Kuwait"),
    "OM": (8, 10, "Oman"),
    "BH": (9, 9, "Bahrain"),
    "JO": (8, 10, "Jordan"),
    "LB": (6, 8, "Lebanon"),
    "IL": (7, 9, "Israel"),
    "IQ": (8, 12, "Iraq"),
    "IR": (10, 10, "Iran"),
    # Africa
    "EG": (14, 14, "Egypt"),
    "ZA": (13, 13, "South Africa"),
    "NG": (11, 12, "Nigeria"),
    "KE": (8, 10, "Kenya"),
    "GH": (9, 12, "Ghana"),
    "MA": (8, 10, "Morocco"),
    "DZ": (9, 11, "Algeria"),
    "TN": (8, 8, "Tunisia"),
    # Oceania
    "AU": (8, 10, "Australia"),
    "NZ": (8, 8, "New Zealand"),
    # South America
    "BR": (11, 11, "Brazil"),
    "AR": (7, 8, "Argentina"),
    "CL": (8, 9, "Chile"),
    "CO": (10, 11, "Colombia"),
    "PE": (8, 9, "Peru"),
    "VE": (7, 10, "Venezuela"),
}

# Countries not in the table
DEFAULT_LICENSE_LENGTH: tuple[int, int, str] = (6, 20, "International")

LICENSE_REQUIRED_MESSAGE = "License number is required"
