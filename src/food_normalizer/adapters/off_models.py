"""Pydantic models for Open Food Facts product export records."""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

NAME_LANGUAGES: tuple[str, ...] = (
    "en",
    "fr",
    "es",
    "de",
    "it",
    "nl",
    "pl",
    "pt",
    "uk",
    "bg",
    "ro",
    "el",
    "ru",
    "tr",
    "ar",
    "hi",
)


class RawProduct(BaseModel):
    """Open Food Facts product record as found in the JSONL export."""

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
    )

    id: str = Field(default="", alias="_id")
    code: str = ""
    product_name: str = ""
    product_name_en: str = ""
    product_name_fr: str = ""
    product_name_es: str = ""
    product_name_de: str = ""
    product_name_it: str = ""
    product_name_nl: str = ""
    product_name_pl: str = ""
    product_name_pt: str = ""
    product_name_uk: str = ""
    product_name_bg: str = ""
    product_name_ro: str = ""
    product_name_el: str = ""
    product_name_ru: str = ""
    product_name_tr: str = ""
    product_name_ar: str = ""
    product_name_hi: str = ""
    lang: str = ""
    brands: str = ""
    serving_size: str = ""
    nutriments: dict[str, object] = Field(default_factory=dict)
    allergens: str = ""
    allergens_tags: list[str] = Field(default_factory=list)
    ingredients_tags: list[str] = Field(default_factory=list)

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: object, info: ValidationInfo) -> object:
        if value is not None:
            return value
        field = cls.model_fields[info.field_name]
        return field.get_default(call_default_factory=True)

    def localized_name(self, language: str) -> str:
        """Return the product name for a language code, or ``""``."""
        return getattr(self, f"product_name_{language}", "") or ""
