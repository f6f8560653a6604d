"""
Currency constants — currency metadata and country → currency mapping.

Every static currency fact lives here. When a market is added, update ONE file.
"""

BASE_CURRENCY = "USD"
DEFAULT_CURRENCY = "USD"

# code -> (name, symbol)
CURRENCIES: dict[str, tuple[str, str]] = {
    "USD": ("US Dollar", "$"),
    "EUR": ("Euro", "€"),
    "GBP": ("British Pound", "£"),
    "PKR": ("Pakistani Rupee", "Rs"),
    "INR": ("Indian Rupee", "₹"),
    "AED": ("UAE Dirham", "د.إ"),
    "SAR": ("Saudi Riyal", "﷼"),
    "QAR": ("Qatari Riyal", "QR"),
    "OMR": ("Omani Rial", "ر.ع."),
    "KWD": ("Kuwaiti Dinar", "KD"),
    "BHD": ("Bahraini Dinar", "BD"),
    "JPY": ("Japanese Yen", "¥"),
    "CNY": ("Chinese Yuan", "¥"),
    "CAD": ("Canadian Dollar", "C$"),
    "AUD": ("Australian Dollar", "A$"),
    "SGD": ("Singapore Dollar", "S$"),
    "CHF": ("Swiss Franc", "CHF"),
    "TRY": ("Turkish Lira", "₺"),
    "RUB": ("Russian Ruble", "₽"),
    "BRL": ("Brazilian Real", "R$"),
    "ZAR": ("South African Rand", "R"),
    "NZD": ("New Zealand Dollar", "NZ$"),
    "MXN": ("Mexican Peso", "Mex$"),
    "HKD": ("Hong Kong Dollar", "HK$"),
    "NOK": ("Norwegian Krone", "kr"),
    "SEK": ("Swedish Krona", "kr"),
    "DKK": ("Danish Krone", "kr"),
    "PLN": ("Polish Zloty", "zł"),
    "ILS": ("Israeli Shekel", "₪"),
    "THB": ("Thai Baht", "฿"),
    "IDR": ("Indonesian Rupiah", "Rp"),
    "MYR": ("Malaysian Ringgit", "RM"),
    "PHP": ("Philippine Peso", "₱"),
    "VND": ("Vietnamese Dong", "₫"),
    "EGP": ("Egyptian Pound", "E£"),
    "NGN": ("Nigerian Naira", "₦"),
    "KES": ("Kenyan Shilling", "KSh"),
    "GHS": ("Ghanaian Cedi", "GH₵"),
    "MAD": ("Moroccan Dirham", "MAD"),
    "BDT": ("Bangladeshi Taka", "৳"),
    "LKR": ("Sri Lankan Rupee", "Rs"),
    "NPR": ("Nepalese Rupee", "Rs"),
    "KRW": ("South Korean Won", "₩"),
    "ARS": ("Argentine Peso", "$"),
    "CLP": ("Chilean Peso", "$"),
    "COP": ("Colombian Peso", "$"),
    "PEN": ("Peruvian Sol", "S/"),
    "CZK": ("Czech Koruna", "Kč"),
    "HUF": ("Hungarian Forint", "Ft"),
    "RON": ("Romanian Leu", "lei"),
    "UAH": ("Ukrainian Hryvnia", "₴"),
    "JOD": ("Jordanian Dinar", "JD"),
}

COUNTRY_TO_CURRENCY: dict[str, str] = {
    # Major countries
    "US": "USD", "GB": "GBP", "EU": "EUR", "PK": "PKR", "IN": "INR",
    "AE": "AED", "SA": "SAR", "QA": "QAR", "OM": "OMR", "KW": "KWD",
    "BH": "BHD", "JP": "JPY", "CN": "CNY", "CA": "CAD", "AU": "AUD",
    "SG": "SGD", "CH": "CHF", "TR": "TRY", "RU": "RUB", "BR": "BRL",
    "ZA": "ZAR", "NZ": "NZD", "MX": "MXN", "HK": "HKD", "NO": "NOK",
    "SE": "SEK", "DK": "DKK", "PL": "PLN", "IL": "ILS", "TH": "THB",
    "ID": "IDR", "MY": "MYR", "PH": "PHP", "VN": "VND", "EG": "EGP",
    "NG": "NGN", "KE": "KES", "GH": "GHS", "MA": "MAD", "DZ": "DZD",
    "TN": "TND", "AF": "AFN", "AL": "ALL", "AM": "AMD", "AO": "AOA",
    "AR": "ARS", "AZ": "AZN", "BA": "BAM", "BB": "BBD", "BD": "BDT",
    "BG": "BGN", "BI": "BIF", "BM": "BMD", "BN": "BND", "BO": "BOB",
    "BS": "BSD", "BT": "BTN", "BW": "BWP", "BY": "BYN", "BZ": "BZD",
    "CD": "CDF", "CL": "CLP", "CO": "COP", "CR": "CRC", "CU": "CUP",
    "CV": "CVE", "CZ": "CZK", "DJ": "DJF", "DO": "DOP", "ET": "ETB",
    "FJ": "FJD", "FK": "FKP", "GE": "GEL", "GI": "GIP", "GM": "GMD",
    "GN": "GNF", "GT": "GTQ", "GY": "GYD", "HN": "HNL", "HR": "EUR",
    "HT": "HTG", "HU": "HUF", "IQ": "IQD", "IR": "IRR", "IS": "ISK",
    "JM": "JMD", "JO": "JOD", "KG": "KGS", "KH": "KHR", "KM": "KMF",
    "KR": "KRW", "KY": "KYD", "KZ": "KZT", "LA": "LAK", "LB": "LBP",
    "LK": "LKR", "LR": "LRD", "LS": "LSL", "LY": "LYD", "MG": "MGA",
    "MK": "MKD", "MM": "MMK", "MN": "MNT", "MO": "MOP", "MR": "MRU",
    "MU": "MUR", "MV": "MVR", "MW": "MWK", "MZ": "MZN", "NA": "NAD",
    "NI": "NIO", "NP": "NPR", "PA": "PAB", "PE": "PEN", "PG": "PGK",
    "PY": "PYG", "RO": "RON", "RS": "RSD", "RW": "RWF", "SB": "SBD",
    "SC": "SCR", "SD": "SDG", "SL": "SLL", "SO": "SOS", "SR": "SRD",
    "SS": "SSP", "ST": "STN", "SY": "SYP", "SZ": "SZL", "TJ": "TJS",
    "TM": "TMT", "TO": "TOP", "TT": "TTD", "TW": "TWD", "TZ": "TZS",
    "UA": "UAH", "UG": "UGX", "UY": "UYU", "UZ": "UZS", "VE": "VES",
    "VU": "VUV", "WS": "WST", "YE": "YER", "ZM": "ZMW", "ZW": "ZWL",
    # Eurozone
    "AT": "EUR", "BE": "EUR", "CY": "EUR", "EE": "EUR", "FI": "EUR",
    "FR": "EUR", "DE": "EUR", "GR": "EUR", "IE": "EUR", "IT": "EUR",
    "LV": "EUR", "LT": "EUR", "LU": "EUR", "MT": "EUR", "NL": "EUR",
    "PT": "EUR", "SK": "EUR", "SI": "EUR", "ES": "EUR",
}
