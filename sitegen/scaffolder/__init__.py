"""Generation steps that write the Eleventy project to disk.

Each step is a class exposing ``async generate(config, work_dir)``, which
returns the project root (or ``None`` when the step does not apply to the
configuration).  Steps that render files share a ``TemplateRenderer``::

    from sitegen.scaffolder import BaseProjectGenerator, TemplateRenderer

    renderer = TemplateRenderer()
    project_dir = await BaseProjectGenerator(renderer).generate(config, Path.cwd())
"""

from sitegen.scaffolder.cms_gen import CmsGenerator
from sitegen.scaffolder.documents import SiteDocuments
from sitegen.scaffolder.git_init import GitInitializer
from sitegen.scaffolder.i18n_gen import MultilanguageGenerator
from sitegen.scaffolder.netlify_gen import NetlifyGenerator
from sitegen.scaffolder.pages_gen import StaticPagesGenerator
from sitegen.scaffolder.project_gen import BaseProjectGenerator
from sitegen.scaffolder.resource_gen import DynamicResourceGenerator
from sitegen.scaffolder.templates import TemplateRenderer

__all__ = [
    "BaseProjectGenerator",
    "CmsGenerator",
    "DynamicResourceGenerator",
    "GitInitializer",
    "MultilanguageGenerator",
    "NetlifyGenerator",
    "SiteDocuments",
    "StaticPagesGenerator",
    "TemplateRenderer",
]
