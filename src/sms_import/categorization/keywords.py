"""Static keyword profiles for category suggestion.

Keywords are keyed by semantic group, not by category id: every user
category whose name resolves to the same group shares one keyword set.
Tokens are lower-case and mix Vietnamese (unaccented) and English
merchant names.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

FOOD_AND_DINING = "Food & Dining"
TRANSPORTATION = "Transportation"
SHOPPING = "Shopping"
ENTERTAINMENT = "Entertainment"
BILLS_AND_UTILITIES = "Bills & Utilities"
HEALTHCARE = "Healthcare"
EDUCATION = "Education"
SALARY = "Salary"
FREELANCE = "Freelance"
INVESTMENT = "Investment"
GIFT = "Gift"


# Ordering matters: earlier substrings win.
GROUP_RULES: Final[tuple[tuple[str, str], ...]] = (
    ("food", FOOD_AND_DINING),
    ("dining", FOOD_AND_DINING),
    ("transport", TRANSPORTATION),
    ("shop", SHOPPING),
    ("entertainment", ENTERTAINMENT),
    ("bill", BILLS_AND_UTILITIES),
    ("utilit", BILLS_AND_UTILITIES),
    ("health", HEALTHCARE),
    ("educat", EDUCATION),
    ("salary", SALARY),
    ("freelance", FREELANCE),
    ("invest", INVESTMENT),
    ("gift", GIFT),
)


_GROUP_KEYWORDS: dict[str, tuple[str, ...]] = {
    FOOD_AND_DINING: (
        # Coffee shops
        "starbucks",
        "highlands",
        "coffee house",
        "trung nguyen",
        "phuc long",
        "cong caphe",
        "cafe",
        "coffee",
        "caphe",
        # Fast food
        "kfc",
        "lotteria",
        "jollibee",
        "pizza",
        "burger king",
        "mcdonald",
        "popeyes",
        "texas chicken",
        # Food delivery
        "grab food",
        "grabfood",
        "gojek",
        "shopeefood",
        "baemin",
        "foody",
        # Restaurants
        "restaurant",
        "nha hang",
        "quan an",
        "com",
        "pho",
        "bun",
        "banh mi",
        "food court",
        "buffet",
    ),
    TRANSPORTATION: (
        "grab",
        "be",
        "gojek",
        "uber",
        "taxi",
        "xe om",
        "petrolimex",
        "pvoil",
        "xang",
        "gas",
        "fuel",
        "parking",
        "bai do xe",
        "toll",
        "phi duong",
        "vinfast",
        "bus",
        "xe buyt",
        "metro",
        "train",
        "tau",
    ),
    SHOPPING: (
        "vinmart",
        "coopmart",
        "big c",
        "lotte mart",
        "circle k",
        "7-eleven",
        "ministop",
        "family mart",
        "guardian",
        "watsons",
        "pharmacity",
        "uniqlo",
        "h&m",
        "zara",
        "muji",
        "miniso",
        "daiso",
        "shopee",
        "lazada",
        "tiki",
        "sendo",
        "fashion",
        "clothing",
        "shoes",
        "giay",
        "quan ao",
    ),
    ENTERTAINMENT: (
        "netflix",
        "spotify",
        "youtube",
        "apple music",
        "zing mp3",
        "cgv",
        "galaxy cinema",
        "lotte cinema",
        "mega gs",
        "cinema",
        "rap phim",
        "game",
        "steam",
        "playstation",
        "xbox",
        "karaoke",
        "bar",
        "club",
        "gym",
        "fitness",
        "yoga",
    ),
    BILLS_AND_UTILITIES: (
        "evn",
        "dien",
        "electricity",
        "water",
        "nuoc",
        "vnpt",
        "viettel",
        "fpt",
        "mobifone",
        "vinaphone",
        "internet",
        "wifi",
        "gas",
        "petrovietnam gas",
        "pvgas",
        "apartment",
        "can ho",
        "management fee",
        "phi quan ly",
    ),
    HEALTHCARE: (
        "hospital",
        "benh vien",
        "clinic",
        "phong kham",
        "pharmacy",
        "pharmacity",
        "nha thuoc",
        "doctor",
        "bac si",
        "dental",
        "nha khoa",
        "medicine",
        "thuoc",
        "insurance",
        "bao hiem",
        "vaccination",
        "tiem chung",
    ),
    EDUCATION: (
        "school",
        "truong",
        "university",
        "dai hoc",
        "course",
        "khoa hoc",
        "tuition",
        "hoc phi",
        "book",
        "sach",
        "fahasa",
        "phuong nam",
        "udemy",
        "coursera",
        "skillshare",
        "english",
        "tieng anh",
    ),
    SALARY: (
        "salary",
        "luong",
        "wage",
        "payroll",
        "cong ty",
        "company",
    ),
    FREELANCE: (
        "freelance",
        "upwork",
        "fiverr",
        "project",
        "du an",
        "contract",
        "hop dong",
    ),
    INVESTMENT: (
        "stock",
        "co phieu",
        "dividend",
        "co tuc",
        "bond",
        "trai phieu",
        "fund",
        "quy",
        "crypto",
        "bitcoin",
    ),
    GIFT: (
        "gift",
        "qua",
        "lucky money",
        "li xi",
        "bonus",
        "thuong",
    ),
}

GROUP_KEYWORDS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(_GROUP_KEYWORDS)
