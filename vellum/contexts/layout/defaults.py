"""
Default values for VELLUM layout settings.

Provides the hardcoded layer of the configuration cascade. This layer is
total: it defines every key the engine reads, so resolved configurations
never miss a key regardless of what templates or users supply.

Used by:
- config_resolver.py (bottom layer of the cascade)
- field_styles.py (key naming for per-field toggles)
- column_distributor.py (known section ids)
"""

import copy
from typing import Any, Dict

# The twelve section ids, in default document order
SECTION_IDS = (
    "summary",
    "work",
    "education",
    "skills",
    "projects",
    "certificates",
    "languages",
    "interests",
    "publications",
    "awards",
    "references",
    "custom",
)

DEFAULT_SECTION_TITLES = {
    "summary": "Professional Summary",
    "work": "Professional Experience",
    "education": "Education",
    "skills": "Skills",
    "projects": "Projects",
    "certificates": "Certificates",
    "languages": "Languages",
    "interests": "Interests",
    "publications": "Publications",
    "awards": "Awards",
    "references": "References",
    "custom": "Custom",
}

# Accent colour used when neither the resume nor the template supplies one
DEFAULT_THEME_COLOR = "#2563eb"

DEFAULT_COLOR_TARGETS = ["headings", "links", "icons", "decorations"]

# Core typography, page geometry and spacing
BASE_SETTINGS = {
    "fontSize": 9,
    "lineHeight": 1.3,
    "fontFamily": "Roboto",
    "marginHorizontal": 12,
    "marginVertical": 12,
    "sectionMargin": 4,
    "bulletMargin": 1,
    "useBullets": True,
    "headerBottomMargin": 12,
    "themeColorTarget": DEFAULT_COLOR_TARGETS,
    "sectionOrder": list(SECTION_IDS),
    "linkShowIcon": True,
    "linkShowFullUrl": False,
}

HEADING_VISIBILITY = {f"{section_id}HeadingVisible": True for section_id in SECTION_IDS}

# Page layout and header arrangement
LAYOUT_SETTINGS = {
    "columnCount": 1,
    "headerPosition": "top",
    "leftColumnWidth": 30,
    "personalDetailsAlign": "left",
    "personalDetailsArrangement": 1,
    "personalDetailsContactStyle": "icon",
    "contactSeparator": "pipe",
    "showProfileImage": False,
    "profileImageSize": "M",
    "profileImageShape": "circle",
    "profileImageBorder": False,
}

# Name, title and contact line typography
HEADER_TYPOGRAPHY = {
    "nameFontSize": 28,
    "nameLineHeight": 1.2,
    "nameBold": True,
    "nameLetterSpacing": 0,
    "titleFontSize": 14,
    "titleLineHeight": 1.2,
    "titleBold": False,
    "titleItalic": False,
    "contactFontSize": 10,
    "contactBold": False,
    "contactItalic": False,
}

SECTION_HEADING_SETTINGS = {
    "sectionHeadingStyle": 1,
    "sectionHeadingAlign": "left",
    "sectionHeadingBold": True,
    "sectionHeadingCapitalization": "uppercase",
    "sectionHeadingSize": "M",
    "sectionHeadingLetterSpacing": 0.5,
}

ENTRY_SETTINGS = {
    "entryLayoutStyle": 1,
    "entryTitleSize": "M",
}

# Per-section, per-field bold/italic/list-style toggles
DEFAULT_SECTION_STYLES = {
    # Skills
    "skillsDisplayStyle": "grid",
    "skillsLevelStyle": 0,
    "skillsListStyle": "bullet",
    # Languages
    "languagesDisplayStyle": "list",
    "languagesListStyle": "bullet",
    "languagesNameBold": True,
    "languagesNameItalic": False,
    "languagesFluencyBold": False,
    "languagesFluencyItalic": False,
    # Interests
    "interestsDisplayStyle": "list",
    "interestsListStyle": "bullet",
    "interestsNameBold": True,
    "interestsNameItalic": False,
    "interestsKeywordsBold": False,
    "interestsKeywordsItalic": False,
    # Experience
    "experienceCompanyListStyle": "none",
    "experienceCompanyBold": True,
    "experienceCompanyItalic": False,
    "experiencePositionBold": True,
    "experiencePositionItalic": False,
    "experienceWebsiteBold": False,
    "experienceWebsiteItalic": False,
    "experienceDateBold": False,
    "experienceDateItalic": False,
    "experienceAchievementsListStyle": "bullet",
    "experienceAchievementsBold": False,
    "experienceAchievementsItalic": False,
    # Education
    "educationInstitutionListStyle": "none",
    "educationInstitutionBold": True,
    "educationInstitutionItalic": False,
    "educationDegreeBold": True,
    "educationDegreeItalic": False,
    "educationDateBold": False,
    "educationDateItalic": False,
    "educationGpaBold": False,
    "educationGpaItalic": False,
    "educationCoursesBold": False,
    "educationCoursesItalic": False,
    # Projects
    "projectsListStyle": "bullet",
    "projectsNameBold": True,
    "projectsNameItalic": False,
    "projectsDateBold": False,
    "projectsDateItalic": False,
    "projectsTechnologiesBold": False,
    "projectsTechnologiesItalic": False,
    "projectsAchievementsListStyle": "bullet",
    "projectsFeaturesBold": False,
    "projectsFeaturesItalic": False,
    "projectsUrlBold": False,
    "projectsUrlItalic": False,
    # Certificates
    "certificatesListStyle": "bullet",
    "certificatesNameBold": True,
    "certificatesNameItalic": False,
    "certificatesIssuerBold": False,
    "certificatesIssuerItalic": False,
    "certificatesDateBold": False,
    "certificatesDateItalic": False,
    "certificatesUrlBold": False,
    "certificatesUrlItalic": False,
    # Publications
    "publicationsListStyle": "bullet",
    "publicationsNameBold": True,
    "publicationsNameItalic": False,
    "publicationsPublisherBold": False,
    "publicationsPublisherItalic": False,
    "publicationsUrlBold": False,
    "publicationsUrlItalic": False,
    "publicationsDateBold": False,
    "publicationsDateItalic": False,
    # Awards
    "awardsListStyle": "bullet",
    "awardsTitleBold": True,
    "awardsTitleItalic": False,
    "awardsAwarderBold": False,
    "awardsAwarderItalic": False,
    "awardsDateBold": False,
    "awardsDateItalic": False,
    # References
    "referencesListStyle": "bullet",
    "referencesNameBold": True,
    "referencesNameItalic": False,
    "referencesPositionBold": False,
    "referencesPositionItalic": False,
    # Custom
    "customSectionListStyle": "bullet",
    "customSectionNameBold": True,
    "customSectionNameItalic": False,
    "customSectionDescriptionBold": False,
    "customSectionDescriptionItalic": False,
    "customSectionDateBold": False,
    "customSectionDateItalic": False,
    "customSectionUrlBold": False,
    "customSectionUrlItalic": False,
}


HARDCODED_DEFAULTS: Dict[str, Any] = {
    **BASE_SETTINGS,
    **HEADING_VISIBILITY,
    **LAYOUT_SETTINGS,
    **HEADER_TYPOGRAPHY,
    **SECTION_HEADING_SETTINGS,
    **ENTRY_SETTINGS,
    **DEFAULT_SECTION_STYLES,
}


def get_hardcoded_defaults() -> Dict[str, Any]:
    """
    Get a fresh copy of the hardcoded configuration layer.

    Returns:
        Dict with every layout setting key the engine reads
    """
    return copy.deepcopy(HARDCODED_DEFAULTS)
