"""Currency reference table.

Fixed, compiled-in ISO 4217 currency definitions. Each definition pairs an
ISO alphabetic code with its display symbol and the locale whose number
formatting conventions apply to amounts in that currency. The locale is
only used to derive separator characters; it does not restrict where the
currency may appear.

Symbols are not unique: "$" alone is shared by over twenty currencies.
Currencies without a well-known glyph (precious metals, testing and
settlement units) use their ISO code as symbol.

Adding or removing a supported currency only changes _CURRENCY_DATA.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache

__all__ = [
    "CURRENCIES",
    "CurrencyDefinition",
    "get_currency",
    "list_currencies",
]


@dataclass(frozen=True, slots=True)
class CurrencyDefinition:
    """One supported currency.

    Immutable, thread-safe, hashable.

    Attributes:
        iso_code: ISO 4217 alphabetic code (e.g. 'USD').
        symbol: Display symbol (e.g. '$', '€'); may be shared across currencies.
        locale: POSIX locale identifier supplying separator conventions.
    """

    iso_code: str
    symbol: str
    locale: str


# (iso_code, symbol, locale)
# ruff: noqa: RUF001 - currency glyphs are intentionally non-ASCII
_CURRENCY_DATA: tuple[tuple[str, str, str], ...] = (
    ("AED", "د.إ", "en_US"),   # UAE Dirham
    ("AFN", "؋", "en_US"),     # Afghan Afghani
    ("ALL", "L", "en_US"),     # Albanian Lek
    ("AMD", "֏", "en_US"),     # Armenian Dram
    ("ANG", "ƒ", "en_US"),     # Netherlands Antillean Guilder
    ("AOA", "Kz", "en_US"),    # Angolan Kwanza
    ("ARS", "$", "es_AR"),     # Argentine Peso
    ("AUD", "$", "en_AU"),     # Australian Dollar
    ("AWG", "ƒ", "en_US"),     # Aruban Florin
    ("AZN", "₼", "en_US"),     # Azerbaijani Manat
    ("BAM", "KM", "en_US"),    # Bosnia-Herzegovina Convertible Mark
    ("BBD", "$", "en_US"),     # Barbadian Dollar
    ("BDT", "৳", "en_US"),     # Bangladeshi Taka
    ("BGN", "лв", "bg_BG"),    # Bulgarian Lev
    ("BHD", "ب.د", "en_US"),   # Bahraini Dinar
    ("BIF", "Fr", "en_US"),    # Burundian Franc
    ("BMD", "$", "en_US"),     # Bermudan Dollar
    ("BND", "$", "en_US"),     # Brunei Dollar
    ("BOB", "Bs.", "en_US"),   # Bolivian Boliviano
    ("BRL", "R$", "pt_BR"),    # Brazilian Real
    ("BSD", "$", "en_US"),     # Bahamian Dollar
    ("BTN", "Nu.", "en_US"),   # Bhutanese Ngultrum
    ("BWP", "P", "en_US"),     # Botswanan Pula
    ("BYN", "Br", "be_BY"),    # Belarusian Ruble
    ("BYR", "Br", "be_BY"),    # Belarusian Ruble (2000-2016)
    ("BZD", "$", "en_US"),     # Belize Dollar
    ("CAD", "$", "en_CA"),     # Canadian Dollar
    ("CDF", "Fr", "en_US"),    # Congolese Franc
    ("CHF", "Fr", "de_CH"),    # Swiss Franc
    ("CLF", "UF", "es_CL"),    # Chilean Unit of Account
    ("CLP", "$", "es_CL"),     # Chilean Peso
    ("CNY", "¥", "zh_CN"),     # Chinese Yuan
    ("COP", "$", "es_CO"),     # Colombian Peso
    ("CRC", "₡", "en_US"),     # Costa Rican Colon
    ("CUC", "$", "en_US"),     # Cuban Convertible Peso
    ("CUP", "$", "en_US"),     # Cuban Peso
    ("CVE", "$", "en_US"),     # Cape Verdean Escudo
    ("CZK", "Kč", "cs_CZ"),    # Czech Koruna
    ("DJF", "Fdj", "en_US"),   # Djiboutian Franc
    ("DKK", "kr.", "da_DK"),   # Danish Krone
    ("DOP", "$", "en_US"),     # Dominican Peso
    ("DZD", "د.ج", "en_US"),   # Algerian Dinar
    ("EGP", "ج.م", "en_US"),   # Egyptian Pound
    ("ERN", "Nfk", "en_US"),   # Eritrean Nakfa
    ("ETB", "Br", "en_US"),    # Ethiopian Birr
    ("EUR", "€", "de_DE"),     # Euro
    ("FJD", "$", "en_US"),     # Fijian Dollar
    ("FKP", "£", "en_US"),     # Falkland Islands Pound
    ("GBP", "£", "en_GB"),     # British Pound
    ("GEL", "₾", "ka_GE"),     # Georgian Lari
    ("GHS", "₵", "en_US"),     # Ghanaian Cedi
    ("GIP", "£", "en_US"),     # Gibraltar Pound
    ("GMD", "D", "en_US"),     # Gambian Dalasi
    ("GNF", "Fr", "en_US"),    # Guinean Franc
    ("GTQ", "Q", "en_US"),     # Guatemalan Quetzal
    ("GYD", "$", "en_US"),     # Guyanaese Dollar
    ("HKD", "$", "en_HK"),     # Hong Kong Dollar
    ("HNL", "L", "en_US"),     # Honduran Lempira
    ("HRK", "kn", "hr_HR"),    # Croatian Kuna
    ("HTG", "G", "en_US"),     # Haitian Gourde
    ("HUF", "Ft", "hu_HU"),    # Hungarian Forint
    ("IDR", "Rp", "id_ID"),    # Indonesian Rupiah
    ("ILS", "₪", "en_US"),     # Israeli New Shekel
    ("INR", "₹", "en_IN"),     # Indian Rupee
    ("IQD", "ع.د", "en_US"),   # Iraqi Dinar
    ("IRR", "﷼", "en_US"),     # Iranian Rial
    ("ISK", "kr", "is_IS"),    # Icelandic Krona
    ("JMD", "$", "en_US"),     # Jamaican Dollar
    ("JOD", "د.ا", "en_US"),   # Jordanian Dinar
    ("JPY", "¥", "ja_JP"),     # Japanese Yen
    ("KES", "KSh", "en_KE"),   # Kenyan Shilling
    ("KGS", "som", "en_US"),   # Kyrgystani Som
    ("KHR", "៛", "en_US"),     # Cambodian Riel
    ("KMF", "Fr", "en_US"),    # Comorian Franc
    ("KPW", "₩", "en_US"),     # North Korean Won
    ("KRW", "₩", "ko_KR"),     # South Korean Won
    ("KWD", "د.ك", "en_US"),   # Kuwaiti Dinar
    ("KYD", "$", "en_US"),     # Cayman Islands Dollar
    ("KZT", "₸", "kk_KZ"),     # Kazakhstani Tenge
    ("LAK", "₭", "en_US"),     # Laotian Kip
    ("LBP", "ل.ل", "en_US"),   # Lebanese Pound
    ("LKR", "₨", "en_US"),     # Sri Lankan Rupee
    ("LRD", "$", "en_US"),     # Liberian Dollar
    ("LSL", "L", "en_US"),     # Lesotho Loti
    ("LYD", "ل.د", "en_US"),   # Libyan Dinar
    ("MAD", "د.م.", "en_US"),  # Moroccan Dirham
    ("MDL", "L", "en_US"),     # Moldovan Leu
    ("MGA", "Ar", "en_US"),    # Malagasy Ariary
    ("MKD", "ден", "en_US"),   # Macedonian Denar
    ("MMK", "K", "en_US"),     # Myanmar Kyat
    ("MNT", "₮", "en_US"),     # Mongolian Tugrik
    ("MOP", "P", "en_US"),     # Macanese Pataca
    ("MRU", "UM", "en_US"),    # Mauritanian Ouguiya
    ("MUR", "₨", "en_US"),     # Mauritian Rupee
    ("MVR", "Rf", "en_US"),    # Maldivian Rufiyaa
    ("MWK", "MK", "en_US"),    # Malawian Kwacha
    ("MXN", "$", "es_MX"),     # Mexican Peso
    ("MYR", "RM", "ms_MY"),    # Malaysian Ringgit
    ("MZN", "MTn", "en_US"),   # Mozambican Metical
    ("NAD", "$", "en_US"),     # Namibian Dollar
    ("NGN", "₦", "en_NG"),     # Nigerian Naira
    ("NIO", "C$", "en_US"),    # Nicaraguan Cordoba
    ("NOK", "kr", "nb_NO"),    # Norwegian Krone
    ("NPR", "₨", "en_US"),     # Nepalese Rupee
    ("NZD", "$", "en_NZ"),     # New Zealand Dollar
    ("OMR", "ر.ع.", "en_US"),  # Omani Rial
    ("PAB", "B/.", "en_US"),   # Panamanian Balboa
    ("PEN", "S/", "en_US"),    # Peruvian Sol
    ("PGK", "K", "en_US"),     # Papua New Guinean Kina
    ("PHP", "₱", "fil_PH"),    # Philippine Peso
    ("PKR", "₨", "en_PK"),     # Pakistani Rupee
    ("PLN", "zł", "pl_PL"),    # Polish Zloty
    ("PYG", "₲", "en_US"),     # Paraguayan Guarani
    ("QAR", "ر.ق", "en_US"),   # Qatari Riyal
    ("RON", "Lei", "ro_RO"),   # Romanian Leu
    ("RSD", "дин.", "en_US"),  # Serbian Dinar
    ("RUB", "₽", "ru_RU"),     # Russian Ruble
    ("RWF", "FRw", "en_US"),   # Rwandan Franc
    ("SAR", "ر.س", "en_US"),   # Saudi Riyal
    ("SBD", "$", "en_US"),     # Solomon Islands Dollar
    ("SCR", "₨", "en_US"),     # Seychellois Rupee
    ("SDG", "£", "en_US"),     # Sudanese Pound
    ("SEK", "kr", "sv_SE"),    # Swedish Krona
    ("SGD", "$", "en_SG"),     # Singapore Dollar
    ("SHP", "£", "en_US"),     # St. Helena Pound
    ("SKK", "Sk", "en_US"),    # Slovak Koruna
    ("SLL", "Le", "en_US"),    # Sierra Leonean Leone
    ("SOS", "Sh", "en_US"),    # Somali Shilling
    ("SRD", "$", "en_US"),     # Surinamese Dollar
    ("SSP", "£", "en_US"),     # South Sudanese Pound
    ("STD", "Db", "en_US"),    # Sao Tome and Principe Dobra (1977-2017)
    ("STN", "Db", "en_US"),    # Sao Tome and Principe Dobra
    ("SVC", "₡", "en_US"),     # Salvadoran Colon
    ("SYP", "£S", "en_US"),    # Syrian Pound
    ("SZL", "E", "en_US"),     # Swazi Lilangeni
    ("THB", "฿", "th_TH"),     # Thai Baht
    ("TJS", "ЅМ", "en_US"),    # Tajikistani Somoni
    ("TMT", "T", "en_US"),     # Turkmenistani Manat
    ("TND", "د.ت", "en_US"),   # Tunisian Dinar
    ("TOP", "T$", "en_US"),    # Tongan Pa'anga
    ("TRY", "₺", "tr_TR"),     # Turkish Lira
    ("TTD", "$", "en_US"),     # Trinidad and Tobago Dollar
    ("TWD", "$", "zh_TW"),     # New Taiwan Dollar
    ("TZS", "Sh", "en_US"),    # Tanzanian Shilling
    ("UAH", "₴", "uk_UA"),     # Ukrainian Hryvnia
    ("UGX", "USh", "en_US"),   # Ugandan Shilling
    ("USD", "$", "en_US"),     # US Dollar
    ("UYU", "$U", "en_US"),    # Uruguayan Peso
    ("UYW", "UP", "en_US"),    # Uruguayan Nominal Wage Index Unit
    ("UZS", "so'm", "en_US"),  # Uzbekistani Som
    ("VES", "Bs", "en_US"),    # Venezuelan Bolivar
    ("VND", "₫", "vi_VN"),     # Vietnamese Dong
    ("VUV", "Vt", "en_US"),    # Vanuatu Vatu
    ("WST", "T", "en_US"),     # Samoan Tala
    ("XAF", "FCFA", "en_US"),  # Central African CFA Franc
    ("XAG", "XAG", "en_US"),   # Silver (troy ounce)
    ("XAU", "XAU", "en_US"),   # Gold (troy ounce)
    ("XBA", "XBA", "en_US"),   # European Composite Unit
    ("XBB", "XBB", "en_US"),   # European Monetary Unit
    ("XBC", "XBC", "en_US"),   # European Unit of Account (XBC)
    ("XBD", "XBD", "en_US"),   # European Unit of Account (XBD)
    ("XCD", "$", "en_US"),     # East Caribbean Dollar
    ("XDR", "SDR", "en_US"),   # Special Drawing Rights
    ("XOF", "CFA", "en_US"),   # West African CFA Franc
    ("XPD", "XPD", "en_US"),   # Palladium (troy ounce)
    ("XPF", "Fr", "en_US"),    # CFP Franc
    ("XPT", "XPT", "en_US"),   # Platinum (troy ounce)
    ("XTS", "XTS", "en_US"),   # Testing Currency Code
    ("YER", "﷼", "en_US"),     # Yemeni Rial
    ("ZAR", "R", "en_ZA"),     # South African Rand
    ("ZMK", "ZK", "en_US"),    # Zambian Kwacha (1968-2012)
    ("ZMW", "K", "en_US"),     # Zambian Kwacha
    ("ZWL", "$", "en_US"),     # Zimbabwean Dollar (2009)
)

CURRENCIES: tuple[CurrencyDefinition, ...] = tuple(
    CurrencyDefinition(iso_code=code, symbol=symbol, locale=locale)
    for code, symbol, locale in _CURRENCY_DATA
)


@cache
def _by_iso_code() -> dict[str, CurrencyDefinition]:
    return {definition.iso_code: definition for definition in CURRENCIES}


def get_currency(code: str) -> CurrencyDefinition | None:
    """Look up a supported currency by ISO 4217 code.

    Lookup is exact and case-sensitive, matching how codes are recognized
    in input strings.

    Args:
        code: ISO 4217 code (e.g. 'USD')

    Returns:
        CurrencyDefinition, or None if the code is not in the table

    Example:
        >>> get_currency("PAB")
        CurrencyDefinition(iso_code='PAB', symbol='B/.', locale='en_US')
        >>> get_currency("usd") is None
        True
    """
    return _by_iso_code().get(code)


def list_currencies() -> frozenset[str]:
    """Return the ISO 4217 codes of every supported currency."""
    return frozenset(_by_iso_code())
