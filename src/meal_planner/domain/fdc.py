"""Models for USDA FoodData Central food payloads."""

from pydantic import BaseModel, ConfigDict, Field


class _FdcModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FdcNutrientInfo(_FdcModel):
    """Nutrient definition attached to a food nutrient."""

    id: int | None = None
    number: str
    name: str | None = None
    unit_name: str | None = Field(default=None, alias="unitName")


class FdcFoodNutrient(_FdcModel):
    """Amount of one nutrient per 100 g of food."""

    nutrient: FdcNutrientInfo
    amount: float | None = None


class FdcMeasureUnit(_FdcModel):
    """Unit a food portion is measured in."""

    id: int | None = None
    name: str | None = None
    abbreviation: str = ""


class FdcFoodPortion(_FdcModel):
    """Household portion with its gram weight."""

    gram_weight: float = Field(alias="gramWeight", ge=0.0)
    amount: float = Field(default=1.0, ge=0.0)
    measure_unit: FdcMeasureUnit = Field(alias="measureUnit")


class FdcFoodCategory(_FdcModel):
    """FDC food category."""

    id: int | None = None
    code: str
    description: str | None = None


class FdcFoodItem(_FdcModel):
    """Food details as returned by the FDC food endpoint."""

    fdc_id: int = Field(alias="fdcId")
    description: str
    food_category: FdcFoodCategory | None = Field(default=None, alias="foodCategory")
    food_nutrients: list[FdcFoodNutrient] = Field(
        default_factory=list, alias="foodNutrients"
    )
    food_portions: list[FdcFoodPortion] = Field(
        default_factory=list, alias="foodPortions"
    )
