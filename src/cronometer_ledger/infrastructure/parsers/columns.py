"""
Column dispatch tables for Cronometer exports.

Each export family has a closed, read-only table mapping an exact header
name to a decoder. A decoder turns the raw cell text into the row buffer
entries it populates. Columns missing from a table are ignored.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from cronometer_ledger.domain.records import ExportKind
from cronometer_ledger.utils.coercion import parse_field_float, parse_reading, split_amount

Decoder = Callable[[str], dict[str, Any]]

DAY = "day"
TIME = "time"


def text(field: str) -> Decoder:
    """Copy the cell verbatim into ``field``."""

    def decode(value: str) -> dict[str, Any]:
        return {field: value}

    return decode


def number(field: str, label: str) -> Decoder:
    """Coerce the cell to a float, attributing failures to ``label``."""

    def decode(value: str) -> dict[str, Any]:
        return {field: parse_field_float(value, label)}

    return decode


def serving_amount(value: str) -> dict[str, Any]:
    quantity_value, quantity_unit = split_amount(value)
    return {"quantity_value": quantity_value, "quantity_unit": quantity_unit}


def biometric_amount(value: str) -> dict[str, Any]:
    return {"amount": parse_reading(value, "amount")}


_TIMESTAMP_COLUMNS: dict[str, Decoder] = {
    "Day": text(DAY),
    "Time": text(TIME),
}

# (header, field, label)
NUTRIENT_COLUMNS: tuple[tuple[str, str, str], ...] = (
    ("Energy (kcal)", "energy_kcal", "energy"),
    ("Caffeine (mg)", "caffeine_mg", "caffeine"),
    ("Water (g)", "water_g", "water"),
    ("B1 (Thiamine) (mg)", "b1_mg", "vitamin B1"),
    ("B2 (Riboflavin) (mg)", "b2_mg", "vitamin B2"),
    ("B3 (Niacin) (mg)", "b3_mg", "vitamin B3"),
    ("B5 (Pantothenic Acid) (mg)", "b5_mg", "vitamin B5"),
    ("B6 (Pyridoxine) (mg)", "b6_mg", "vitamin B6"),
    ("B12 (Cobalamin) (µg)", "b12_ug", "vitamin B12"),
    ("Biotin (µg)", "biotin_ug", "biotin"),
    ("Choline (mg)", "choline_mg", "choline"),
    ("Folate (µg)", "folate_ug", "folate"),
    ("Vitamin A (IU)", "vitamin_a_iu", "vitamin A"),
    ("Vitamin C (mg)", "vitamin_c_mg", "vitamin C"),
    ("Vitamin D (IU)", "vitamin_d_iu", "vitamin D"),
    ("Vitamin E (mg)", "vitamin_e_mg", "vitamin E"),
    ("Vitamin K (µg)", "vitamin_k_ug", "vitamin K"),
    ("Calcium (mg)", "calcium_mg", "calcium"),
    ("Chromium (µg)", "chromium_ug", "chromium"),
    ("Copper (mg)", "copper_mg", "copper"),
    ("Fluoride (µg)", "fluoride_ug", "fluoride"),
    ("Iodine (µg)", "iodine_ug", "iodine"),
    ("Iron (mg)", "iron_mg", "iron"),
    ("Magnesium (mg)", "magnesium_mg", "magnesium"),
    ("Manganese (mg)", "manganese_mg", "manganese"),
    ("Phosphorus (mg)", "phosphorus_mg", "phosphorus"),
    ("Potassium (mg)", "potassium_mg", "potassium"),
    ("Selenium (µg)", "selenium_ug", "selenium"),
    ("Sodium (mg)", "sodium_mg", "sodium"),
    ("Zinc (mg)", "zinc_mg", "zinc"),
    ("Carbs (g)", "carbs_g", "carbohydrates"),
    ("Fiber (g)", "fiber_g", "fiber"),
    ("Fructose (g)", "fructose_g", "fructose"),
    ("Galactose (g)", "galactose_g", "galactose"),
    ("Glucose (g)", "glucose_g", "glucose"),
    ("Lactose (g)", "lactose_g", "lactose"),
    ("Maltose (g)", "maltose_g", "maltose"),
    ("Starch (g)", "starch_g", "starch"),
    ("Sucrose (g)", "sucrose_g", "sucrose"),
    ("Sugars (g)", "sugars_g", "sugars"),
    ("Net Carbs (g)", "net_carbs_g", "net carbs"),
    ("Fat (g)", "fat_g", "fat"),
    ("Cholesterol (mg)", "cholesterol_mg", "cholesterol"),
    ("Monounsaturated (g)", "monounsaturated_g", "monounsaturated fat"),
    ("Polyunsaturated (g)", "polyunsaturated_g", "polyunsaturated fat"),
    ("Saturated (g)", "saturated_g", "saturated fat"),
    ("Trans-Fats (g)", "trans_fats_g", "trans fat"),
    ("Omega-3 (g)", "omega_3_g", "omega-3"),
    ("Omega-6 (g)", "omega_6_g", "omega-6"),
    ("Cystine (g)", "cystine_g", "cystine"),
    ("Histidine (g)", "histidine_g", "histidine"),
    ("Isoleucine (g)", "isoleucine_g", "isoleucine"),
    ("Leucine (g)", "leucine_g", "leucine"),
    ("Lysine (g)", "lysine_g", "lysine"),
    ("Methionine (g)", "methionine_g", "methionine"),
    ("Phenylalanine (g)", "phenylalanine_g", "phenylalanine"),
    ("Protein (g)", "protein_g", "protein"),
    ("Threonine (g)", "threonine_g", "threonine"),
    ("Tryptophan (g)", "tryptophan_g", "tryptophan"),
    ("Tyrosine (g)", "tyrosine_g", "tyrosine"),
    ("Valine (g)", "valine_g", "valine"),
)

SERVING_COLUMNS: Mapping[str, Decoder] = MappingProxyType(
    {
        **_TIMESTAMP_COLUMNS,
        "Group": text("group"),
        "Food Name": text("food_name"),
        "Amount": serving_amount,
        "Category": text("category"),
        **{header: number(field, label) for header, field, label in NUTRIENT_COLUMNS},
    }
)

EXERCISE_COLUMNS: Mapping[str, Decoder] = MappingProxyType(
    {
        **_TIMESTAMP_COLUMNS,
        "Exercise": text("exercise"),
        "Minutes": number("minutes", "minutes"),
        "Calories Burned": number("calories_burned", "calories burned"),
    }
)

BIOMETRIC_COLUMNS: Mapping[str, Decoder] = MappingProxyType(
    {
        **_TIMESTAMP_COLUMNS,
        "Metric": text("metric"),
        "Unit": text("unit"),
        "Amount": biometric_amount,
    }
)

COLUMN_TABLES: Mapping[ExportKind, Mapping[str, Decoder]] = MappingProxyType(
    {
        ExportKind.SERVINGS: SERVING_COLUMNS,
        ExportKind.EXERCISES: EXERCISE_COLUMNS,
        ExportKind.BIOMETRICS: BIOMETRIC_COLUMNS,
    }
)
