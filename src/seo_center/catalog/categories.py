"""Display metadata for the six task categories."""

from dataclasses import dataclass

from src.seo_center.models.enums import SEOCategory


@dataclass(frozen=True, slots=True)
class CategoryInfo:
    id: SEOCategory
    label: str
    description: str


CATEGORIES: tuple[CategoryInfo, ...] = (
    CategoryInfo(SEOCategory.TECHNICAL, "Technical SEO", "Site infrastructure & crawlability"),
    CategoryInfo(SEOCategory.ON_PAGE, "On-Page SEO", "Content optimization & structure"),
    CategoryInfo(SEOCategory.CONTENT, "Content SEO", "Content strategy & creation"),
    CategoryInfo(SEOCategory.OFF_PAGE, "Off-Page SEO", "Link building & authority"),
    CategoryInfo(SEOCategory.LOCAL, "Local SEO", "Local search optimization"),
    CategoryInfo(SEOCategory.TRACKING, "Tracking & Analytics", "Performance monitoring"),
)

_BY_ID = {info.id: info for info in CATEGORIES}


def category_info(category: SEOCategory) -> CategoryInfo:
    return _BY_ID[category]
