"""Shared lookup tables for the website generator.

Every fixed enumeration used by more than one generation step lives here:
project types, language codes and UI translations, CMS resource types with
their field schemas, and the sample data seeded for each site category.
Steps import these tables instead of keeping private copies.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Project types
# ---------------------------------------------------------------------------

TAG_BASIC = "basic"
TAG_MULTILANGUAGE = "multilanguage"
TAG_CMS = "CMS"
TAG_PORTFOLIO = "portfolio"
TAG_BUSINESS = "business"
TAG_BLOG = "blog"

# Choice label -> category tags, in the order they are offered.
PROJECT_TYPES: dict[str, list[str]] = {
    "11ty with static content (Home, About, Services, Contacts)": [TAG_BASIC],
    "11ty with static content + multilanguage support": [TAG_BASIC, TAG_MULTILANGUAGE],
    "11ty + Decap CMS with static and dynamic content": [TAG_BASIC, TAG_CMS],
    "11ty + Decap CMS with static and dynamic content + multilanguage": [
        TAG_BASIC,
        TAG_MULTILANGUAGE,
        TAG_CMS,
    ],
}


def tags_for_project_type(label: str) -> list[str]:
    """Return the category tags encoded by a project type choice label.

    Unknown labels are decoded by keyword so that hand-edited configuration
    files still resolve (``"... multilanguage ..."`` implies the tag).
    """
    if label in PROJECT_TYPES:
        return list(PROJECT_TYPES[label])
    tags = [TAG_BASIC]
    if TAG_MULTILANGUAGE in label:
        tags.append(TAG_MULTILANGUAGE)
    if TAG_CMS in label:
        tags.append(TAG_CMS)
    return tags


# ---------------------------------------------------------------------------
# Languages
# ---------------------------------------------------------------------------

DEFAULT_LANGUAGE = "English"
DEFAULT_LOCALE = "en"

LANGUAGE_CODES: dict[str, str] = {
    "English": "en",
    "Spanish": "es",
    "French": "fr",
    "German": "de",
    "Italian": "it",
    "Portuguese": "pt",
}

# Languages offered in addition to the default one.
ADDITIONAL_LANGUAGES: list[str] = ["Spanish", "French", "Italian", "German", "Portuguese"]

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "home": "Home",
        "about": "About Us",
        "services": "Services",
        "contact": "Contact Us",
        "welcome": "Welcome to",
        "description": "This is a multilanguage website created with 11ty Website Generator.",
    },
    "es": {
        "home": "Inicio",
        "about": "Sobre Nosotros",
        "services": "Servicios",
        "contact": "Contacto",
        "welcome": "Bienvenido a",
        "description": "Este es un sitio web multilingüe creado con 11ty Website Generator.",
    },
    "fr": {
        "home": "Accueil",
        "about": "À propos",
        "services": "Services",
        "contact": "Contact",
        "welcome": "Bienvenue sur",
        "description": "Ceci est un site web multilingue créé avec 11ty Website Generator.",
    },
    "de": {
        "home": "Startseite",
        "about": "Über uns",
        "services": "Leistungen",
        "contact": "Kontakt",
        "welcome": "Willkommen bei",
        "description": "Dies ist eine mehrsprachige Website, erstellt mit 11ty Website Generator.",
    },
    "it": {
        "home": "Home",
        "about": "Chi siamo",
        "services": "Servizi",
        "contact": "Contatti",
        "welcome": "Benvenuto su",
        "description": "Questo è un sito web multilingue creato con 11ty Website Generator.",
    },
    "pt": {
        "home": "Início",
        "about": "Sobre Nós",
        "services": "Serviços",
        "contact": "Contato",
        "welcome": "Bem-vindo a",
        "description": "Este é um site multilíngue criado com 11ty Website Generator.",
    },
}


class Locale(BaseModel, frozen=True):
    """A resolved language variant of the site."""

    name: str
    code: str
    is_default: bool = False

    @property
    def url_prefix(self) -> str:
        """Root URL of the locale (``/`` for the default locale)."""
        return "/" if self.is_default else f"/{self.code}/"


def language_code(language: str) -> str | None:
    """Map a language name (or an already valid code) to its locale code.

    Returns ``None`` for languages outside :data:`LANGUAGE_CODES`.
    """
    if language in LANGUAGE_CODES:
        return LANGUAGE_CODES[language]
    lowered = language.strip().lower()
    for name, code in LANGUAGE_CODES.items():
        if lowered in (code, name.lower()):
            return code
    return None


def resolve_locales(languages: list[str] | None) -> list[Locale]:
    """Resolve configured language names to locales, default locale first.

    Unrecognised names are dropped and duplicates collapse to their first
    occurrence.
    """
    code_to_name = {code: name for name, code in LANGUAGE_CODES.items()}
    locales = [Locale(name=DEFAULT_LANGUAGE, code=DEFAULT_LOCALE, is_default=True)]
    seen = {DEFAULT_LOCALE}
    for language in languages or []:
        code = language_code(language)
        if code is None or code in seen:
            continue
        seen.add(code)
        locales.append(Locale(name=code_to_name[code], code=code))
    return locales


# ---------------------------------------------------------------------------
# Static pages
# ---------------------------------------------------------------------------


class StaticPage(BaseModel, frozen=True):
    """A page of the fixed page set, keyed like its translation entry."""

    key: str
    title: str
    url: str
    directory: str

    def path_in(self, root):
        """Location of the page file below *root*."""
        if self.directory:
            return root / self.directory / "index.njk"
        return root / "index.njk"


STATIC_PAGES: list[StaticPage] = [
    StaticPage(key="home", title="Home", url="/", directory=""),
    StaticPage(key="about", title="About Us", url="/about/", directory="about"),
    StaticPage(key="services", title="Our Services", url="/services/", directory="services"),
    StaticPage(key="contact", title="Contact Us", url="/contact/", directory="contact"),
]

NAV_LINKS: list[dict[str, str]] = [
    {"key": "home", "label": "Home", "url": "/"},
    {"key": "about", "label": "About", "url": "/about/"},
    {"key": "services", "label": "Services", "url": "/services/"},
    {"key": "contact", "label": "Contact", "url": "/contact/"},
]


# ---------------------------------------------------------------------------
# CMS resource types
# ---------------------------------------------------------------------------


class FieldSpec(BaseModel, frozen=True):
    """One Decap CMS field of a resource type."""

    label: str
    name: str
    widget: str
    required: bool = True
    sample: Any = None


class ResourceType(BaseModel, frozen=True):
    """A CMS-managed content type and where its documents live."""

    name: str
    collection: str
    label: str
    label_singular: str
    folder: str
    slug: str = "{{slug}}"
    fields: list[FieldSpec] = Field(default_factory=list)

    @property
    def layout(self) -> str:
        """Layout path used by documents of this type."""
        return f"layouts/{self.collection}.njk"

    @property
    def sample_slug(self) -> str:
        return f"sample-{self.label_singular.lower().replace(' ', '-')}"


_TITLE = FieldSpec(label="Title", name="title", widget="string", sample="Sample {label}")
_IMAGE = FieldSpec(
    label="Featured Image",
    name="featuredImage",
    widget="image",
    required=False,
    sample="/assets/images/uploads/sample.jpg",
)
_BODY = FieldSpec(
    label="Body",
    name="body",
    widget="markdown",
    sample="This is a sample {label_lower} created by the website generator. "
    "Edit it from the admin interface.",
)

RESOURCE_TYPES: dict[str, ResourceType] = {
    "Services": ResourceType(
        name="Services",
        collection="services",
        label="Services",
        label_singular="Service",
        folder="services",
        fields=[
            _TITLE,
            FieldSpec(label="Description", name="description", widget="text",
                      sample="A short summary of the service."),
            FieldSpec(label="Icon", name="icon", widget="string", required=False, sample="code"),
            FieldSpec(label="Price", name="price", widget="string", required=False,
                      sample="From $99"),
            _IMAGE,
            _BODY,
        ],
    ),
    "News/Blog": ResourceType(
        name="News/Blog",
        collection="blog",
        label="Blog Posts",
        label_singular="Blog Post",
        folder="blog",
        slug="{{year}}-{{month}}-{{day}}-{{slug}}",
        fields=[
            _TITLE,
            FieldSpec(label="Publish Date", name="date", widget="datetime",
                      sample="2024-01-01T09:00:00.000Z"),
            FieldSpec(label="Author", name="author", widget="string", sample="Jane Doe"),
            FieldSpec(label="Tags", name="tags", widget="list", required=False,
                      sample=["news", "updates"]),
            FieldSpec(label="Summary", name="summary", widget="text", required=False,
                      sample="A short introduction to the post."),
            _IMAGE,
            _BODY,
        ],
    ),
    "Properties": ResourceType(
        name="Properties",
        collection="properties",
        label="Properties",
        label_singular="Property",
        folder="properties",
        fields=[
            _TITLE,
            FieldSpec(label="Price", name="price", widget="number", sample=250000),
            FieldSpec(label="Location", name="location", widget="string",
                      sample="123 Main Street"),
            FieldSpec(label="Bedrooms", name="bedrooms", widget="number", sample=3),
            FieldSpec(label="Bathrooms", name="bathrooms", widget="number", sample=2),
            FieldSpec(label="Square Footage", name="squareFootage", widget="number",
                      sample=1800),
            _IMAGE,
            _BODY,
        ],
    ),
    "Portfolio": ResourceType(
        name="Portfolio",
        collection="portfolio",
        label="Portfolio",
        label_singular="Project",
        folder="portfolio",
        fields=[
            _TITLE,
            FieldSpec(label="Client", name="client", widget="string", required=False,
                      sample="Acme Corp"),
            FieldSpec(label="Date", name="date", widget="datetime",
                      sample="2024-01-01T09:00:00.000Z"),
            FieldSpec(label="Technologies", name="technologies", widget="list",
                      required=False, sample=["HTML", "CSS", "JavaScript"]),
            FieldSpec(label="Project URL", name="projectUrl", widget="string",
                      required=False, sample="https://example.com"),
            _IMAGE,
            _BODY,
        ],
    ),
    "Products": ResourceType(
        name="Products",
        collection="products",
        label="Products",
        label_singular="Product",
        folder="products",
        fields=[
            _TITLE,
            FieldSpec(label="Price", name="price", widget="number", sample=49.99),
            FieldSpec(label="SKU", name="sku", widget="string", required=False,
                      sample="SKU-0001"),
            FieldSpec(label="In Stock", name="inStock", widget="boolean", sample=True),
            _IMAGE,
            _BODY,
        ],
    ),
}


def resolve_resource_types(names: list[str] | None) -> list[ResourceType]:
    """Return catalog entries for *names*, dropping unknown ones."""
    return [RESOURCE_TYPES[name] for name in names or [] if name in RESOURCE_TYPES]


# ---------------------------------------------------------------------------
# Seed data per site category
# ---------------------------------------------------------------------------

SAMPLE_RESOURCES: dict[str, dict[str, dict[str, Any]]] = {
    TAG_PORTFOLIO: {
        "projects": {
            "items": [
                {
                    "title": "Sample Project 1",
                    "description": "A brief description of the project",
                    "image": "/assets/images/project1.jpg",
                    "technologies": ["HTML", "CSS", "JavaScript"],
                    "link": "https://example.com/project1",
                },
                {
                    "title": "Sample Project 2",
                    "description": "Another project description",
                    "image": "/assets/images/project2.jpg",
                    "technologies": ["React", "Node.js", "MongoDB"],
                    "link": "https://example.com/project2",
                },
            ]
        },
        "skills": {
            "categories": [
                {"name": "Frontend", "skills": ["HTML", "CSS", "JavaScript", "React", "Vue"]},
                {"name": "Backend", "skills": ["Node.js", "Python", "Java", "SQL"]},
            ]
        },
    },
    TAG_BUSINESS: {
        "services": {
            "items": [
                {
                    "title": "Service 1",
                    "description": "Description of service 1",
                    "icon": "code",
                    "features": ["Feature 1", "Feature 2", "Feature 3"],
                },
                {
                    "title": "Service 2",
                    "description": "Description of service 2",
                    "icon": "design",
                    "features": ["Feature 1", "Feature 2", "Feature 3"],
                },
            ]
        },
        "testimonials": {
            "items": [
                {
                    "name": "John Doe",
                    "position": "CEO, Company X",
                    "quote": "Great service and professional team!",
                    "image": "/assets/images/testimonial1.jpg",
                },
                {
                    "name": "Jane Smith",
                    "position": "CTO, Company Y",
                    "quote": "Exceeded our expectations!",
                    "image": "/assets/images/testimonial2.jpg",
                },
            ]
        },
    },
    TAG_BLOG: {
        "categories": {
            "items": [
                {
                    "name": "Technology",
                    "description": "Latest tech news and updates",
                    "slug": "technology",
                },
                {"name": "Design", "description": "UI/UX and graphic design", "slug": "design"},
            ]
        },
        "authors": {
            "items": [
                {
                    "name": "John Writer",
                    "bio": "Tech enthusiast and blogger",
                    "image": "/assets/images/author1.jpg",
                    "social": {"twitter": "johnwriter", "github": "johnwriter"},
                },
                {
                    "name": "Jane Blogger",
                    "bio": "Design expert and consultant",
                    "image": "/assets/images/author2.jpg",
                    "social": {"twitter": "janeblogger", "github": "janeblogger"},
                },
            ]
        },
    },
}

# ---------------------------------------------------------------------------
# Generated package.json dependencies
# ---------------------------------------------------------------------------

BASE_DEPENDENCIES: dict[str, str] = {
    "@11ty/eleventy": "2.0.1",
    "alpinejs": "3.13.3",
    "tailwindcss": "3.3.5",
    "@11ty/eleventy-navigation": "0.3.5",
}

CMS_DEPENDENCIES: dict[str, str] = {
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
    "decap-cms": "^3.0.0",
}

CMS_DEV_DEPENDENCIES: dict[str, str] = {
    "decap-server": "^3.3.1",
    "concurrently": "^8.2.0",
}

CMS_SCRIPTS: dict[str, str] = {
    "cms:proxy": "decap-server",
    "dev:cms": 'concurrently "npm run start" "npm run cms:proxy"',
}
