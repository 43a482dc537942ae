"""
Export record domain models.

This module defines the typed records produced from Cronometer exports:
food servings with their nutrient breakdown, exercises and biometrics.
Records are immutable once constructed.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ExportKind(str, Enum):
    """Enumeration of export families (header vocabularies)."""

    SERVINGS = "servings"
    EXERCISES = "exercises"
    BIOMETRICS = "biometrics"


def _nutrient(unit: str, description: str) -> Any:
    """Declare a nutrient amount field whose unit is implied by the field."""
    return Field(0.0, description=description, json_schema_extra={"unit": unit})


class ServingRecord(BaseModel):
    """
    One logged food serving with its nutrient breakdown.

    Nutrient amounts are plain floats; each field declares its unit in the
    schema (see ``nutrient_unit``).
    """

    recorded_time: datetime = Field(description="Serving timestamp (timezone-aware)")
    group: str = Field("", description="Diary group, e.g. 'Breakfast'")
    food_name: str = Field("", description="Food name as logged")
    quantity_value: float = Field(0.0, description="Numeric part of the amount cell")
    quantity_unit: str = Field("", description="Unit part of the amount cell")

    energy_kcal: float = _nutrient("kcal", "Energy")
    caffeine_mg: float = _nutrient("mg", "Caffeine")
    water_g: float = _nutrient("g", "Water")

    b1_mg: float = _nutrient("mg", "Vitamin B1 (thiamine)")
    b2_mg: float = _nutrient("mg", "Vitamin B2 (riboflavin)")
    b3_mg: float = _nutrient("mg", "Vitamin B3 (niacin)")
    b5_mg: float = _nutrient("mg", "Vitamin B5 (pantothenic acid)")
    b6_mg: float = _nutrient("mg", "Vitamin B6 (pyridoxine)")
    b12_ug: float = _nutrient("µg", "Vitamin B12 (cobalamin)")
    biotin_ug: float = _nutrient("µg", "Biotin")
    choline_mg: float = _nutrient("mg", "Choline")
    folate_ug: float = _nutrient("µg", "Folate")
    vitamin_a_iu: float = _nutrient("IU", "Vitamin A")
    vitamin_c_mg: float = _nutrient("mg", "Vitamin C")
    vitamin_d_iu: float = _nutrient("IU", "Vitamin D")
    vitamin_e_mg: float = _nutrient("mg", "Vitamin E")
    vitamin_k_ug: float = _nutrient("µg", "Vitamin K")

    calcium_mg: float = _nutrient("mg", "Calcium")
    chromium_ug: float = _nutrient("µg", "Chromium")
    copper_mg: float = _nutrient("mg", "Copper")
    fluoride_ug: float = _nutrient("µg", "Fluoride")
    iodine_ug: float = _nutrient("µg", "Iodine")
    iron_mg: float = _nutrient("mg", "Iron")
    magnesium_mg: float = _nutrient("mg", "Magnesium")
    manganese_mg: float = _nutrient("mg", "Manganese")
    phosphorus_mg: float = _nutrient("mg", "Phosphorus")
    potassium_mg: float = _nutrient("mg", "Potassium")
    selenium_ug: float = _nutrient("µg", "Selenium")
    sodium_mg: float = _nutrient("mg", "Sodium")
    zinc_mg: float = _nutrient("mg", "Zinc")

    carbs_g: float = _nutrient("g", "Carbohydrates")
    fiber_g: float = _nutrient("g", "Fiber")
    fructose_g: float = _nutrient("g", "Fructose")
    galactose_g: float = _nutrient("g", "Galactose")
    glucose_g: float = _nutrient("g", "Glucose")
    lactose_g: float = _nutrient("g", "Lactose")
    maltose_g: float = _nutrient("g", "Maltose")
    starch_g: float = _nutrient("g", "Starch")
    sucrose_g: float = _nutrient("g", "Sucrose")
    sugars_g: float = _nutrient("g", "Sugars")
    net_carbs_g: float = _nutrient("g", "Net carbohydrates")

    fat_g: float = _nutrient("g", "Fat")
    cholesterol_mg: float = _nutrient("mg", "Cholesterol")
    monounsaturated_g: float = _nutrient("g", "Monounsaturated fat")
    polyunsaturated_g: float = _nutrient("g", "Polyunsaturated fat")
    saturated_g: float = _nutrient("g", "Saturated fat")
    trans_fats_g: float = _nutrient("g", "Trans fat")
    omega_3_g: float = _nutrient("g", "Omega-3")
    omega_6_g: float = _nutrient("g", "Omega-6")

    cystine_g: float = _nutrient("g", "Cystine")
    histidine_g: float = _nutrient("g", "Histidine")
    isoleucine_g: float = _nutrient("g", "Isoleucine")
    leucine_g: float = _nutrient("g", "Leucine")
    lysine_g: float = _nutrient("g", "Lysine")
    methionine_g: float = _nutrient("g", "Methionine")
    phenylalanine_g: float = _nutrient("g", "Phenylalanine")
    threonine_g: float = _nutrient("g", "Threonine")
    tryptophan_g: float = _nutrient("g", "Tryptophan")
    tyrosine_g: float = _nutrient("g", "Tyrosine")
    valine_g: float = _nutrient("g", "Valine")
    protein_g: float = _nutrient("g", "Protein")

    category: str = Field("", description="Food category label")

    model_config = ConfigDict(frozen=True)


class ExerciseRecord(BaseModel):
    """One logged exercise entry."""

    recorded_time: datetime = Field(description="Exercise timestamp (timezone-aware)")
    exercise: str = Field("", description="Exercise name as logged")
    minutes: float = Field(0.0, description="Duration in minutes")
    calories_burned: float = Field(0.0, description="Energy burned in kcal")

    model_config = ConfigDict(frozen=True)


class BiometricRecord(BaseModel):
    """
    One logged biometric measurement.

    The metric set is open-ended, so the unit travels with each record.
    """

    recorded_time: datetime = Field(description="Measurement timestamp (timezone-aware)")
    metric: str = Field("", description="Metric name, e.g. 'Weight'")
    unit: str = Field("", description="Unit of the amount, e.g. 'kg'")
    amount: float = Field(0.0, description="Measured amount (0 for composite readings)")

    model_config = ConfigDict(frozen=True)


def nutrient_unit(field_name: str) -> str | None:
    """
    Get the unit declared for a serving nutrient field.

    Args:
        field_name: ServingRecord field name (e.g. "sodium_mg").

    Returns:
        Unit string, or None if the field is not a nutrient amount.
    """
    field = ServingRecord.model_fields.get(field_name)
    if field is None or not isinstance(field.json_schema_extra, dict):
        return None
    unit = field.json_schema_extra.get("unit")
    return str(unit) if unit is not None else None


def nutrient_fields() -> list[str]:
    """List ServingRecord nutrient field names in declaration order."""
    return [name for name in ServingRecord.model_fields if nutrient_unit(name) is not None]
