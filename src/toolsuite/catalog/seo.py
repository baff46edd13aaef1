from ..categories import Category
from ..tools.base import PlanTier, Template, ToolDescriptor, ToolProps, lazy_module

SEO_LOGIC = "toolsuite.logic.seo"

SEO_TOOLS = [
    ToolDescriptor(
        id="tool-meta-tag-generator",
        slug="meta-tag-generator",
        category=Category.SEO,
        title="Meta Tag Generator",
        short_description="Generate SEO-optimized meta tags.",
        long_description=(
            "The Meta Tag Generator helps you create effective meta titles and "
            "descriptions, with Open Graph and Twitter Card tags, that improve how "
            "your pages show up in search results and social shares."
        ),
        icon="FaSearch",
        template=Template.GENERATOR,
        keywords=["meta tags", "seo", "generator"],
        tags=["seo", "meta tags", "optimization"],
        props=ToolProps(result_type="json"),
        loader=lazy_module(SEO_LOGIC),
        entry_point="meta_tag_generator",
        handler_path="src/components/tools/MetaTagGeneratorTool.tsx",
    ),
    ToolDescriptor(
        id="tool-keyword-density",
        slug="keyword-density",
        category=Category.SEO,
        title="Keyword Density Checker",
        short_description="Find the most used keywords and flag overuse.",
        icon="FaChartBar",
        template=Template.ANALYZER,
        keywords=["keyword density", "seo", "keyword stuffing"],
        tags=["seo", "keywords", "analysis"],
        props=ToolProps(result_type="table"),
        loader=lazy_module(SEO_LOGIC),
        entry_point="keyword_density",
    ),
    ToolDescriptor(
        id="tool-serp-preview",
        slug="serp-preview",
        category=Category.SEO,
        title="SERP Preview",
        short_description="Preview how a page looks in search results.",
        icon="FaGoogle",
        template=Template.GENERATOR,
        keywords=["serp", "search preview", "snippet"],
        tags=["seo", "preview"],
        props=ToolProps(result_type="json"),
        loader=lazy_module(SEO_LOGIC),
        entry_point="serp_preview",
    ),
    ToolDescriptor(
        id="tool-seo-audit",
        slug="seo-audit",
        category=Category.SEO,
        title="SEO Audit Tool",
        short_description="Check a live page for common on-page SEO issues.",
        icon="FaClipboardCheck",
        template=Template.ANALYZER,
        keywords=["seo audit", "on-page seo", "site check"],
        tags=["seo", "audit"],
        is_experimental=True,
        min_plan=PlanTier.PRO,
        props=ToolProps(input_type="text", result_type="json"),
        loader=lazy_module(SEO_LOGIC),
        entry_point="seo_audit",
        analytics_key="seo_audit",
    ),
]
