"""
Category keys and the static category metadata table.

Tools reference a category by key; the table order below is the order in
which categories are presented.
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict


class Category(str, Enum):
    """Closed set of category keys"""

    SEO = "seo-tools"
    IMAGE = "image-tools"
    VIDEO = "video-tools"
    PDF = "pdf-tools"
    TEXT = "text-tools"
    AUDIO = "audio-tools"
    DEVELOPER = "developer-tools"
    SOCIAL = "social-tools"
    COLOR = "color-tools"
    SECURITY = "security-tools"
    MARKDOWN = "markdown-tools"
    ENCRYPTION = "encryption-tools"
    FILE = "file-tools"
    QRCODE = "qr-code-tools"
    BARCODE = "barcode-tools"
    UNIT_CONVERTER = "unit-converter"
    CURRENCY = "currency-tools"
    TIMESTAMP = "timestamp-tools"
    AI = "ai-tools"
    UX = "ux-tools"
    HTML = "html-tools"
    EMAIL = "email-tools"
    FAVICON = "favicon-tools"
    JSON = "json-tools"
    GIF = "gif-tools"


class CategoryMeta(BaseModel):
    """Display metadata for a category"""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    key: Category
    title: str
    desc: str
    icon: str
    path: str
    color: str


def _meta(key: Category, title: str, desc: str, icon: str, color: str) -> CategoryMeta:
    return CategoryMeta(
        key=key, title=title, desc=desc, icon=icon, path=f"/{key.value}", color=color
    )


CATEGORY_META: List[CategoryMeta] = [
    _meta(Category.TEXT, "Text Tools", "Utilities to transform and analyze text.", "FaFont", "text-blue-500"),
    _meta(Category.SEO, "SEO Tools", "Optimize your content for search engines.", "FaSearch", "text-green-500"),
    _meta(Category.IMAGE, "Image Tools", "Edit, optimize, and convert images easily.", "FaImage", "text-yellow-500"),
    _meta(Category.VIDEO, "Video Tools", "Trim, compress, and convert videos.", "FaVideo", "text-red-500"),
    _meta(Category.PDF, "PDF Tools", "Split, merge, and convert PDF files.", "FaFilePdf", "text-pink-500"),
    _meta(Category.AUDIO, "Audio Tools", "Edit, compress, and convert audio files.", "FaMusic", "text-indigo-500"),
    _meta(Category.DEVELOPER, "Developer Tools", "Handy utilities for developers and coders.", "FaCode", "text-gray-600"),
    _meta(Category.SOCIAL, "Social Tools", "Tools for social media optimization.", "FaShareAlt", "text-pink-400"),
    _meta(Category.COLOR, "Color Tools", "Pick, convert, and generate colors.", "FaPalette", "text-amber-500"),
    _meta(Category.SECURITY, "Security Tools", "Check, secure, and analyze your data.", "FaShieldAlt", "text-red-600"),
    _meta(Category.MARKDOWN, "Markdown Tools", "Convert and preview markdown content.", "FaMarkdown", "text-gray-800"),
    _meta(Category.ENCRYPTION, "Encryption Tools", "Encrypt and decrypt your sensitive data.", "FaLock", "text-purple-700"),
    _meta(Category.FILE, "File Tools", "Manage and convert various file types.", "FaFile", "text-purple-500"),
    _meta(Category.QRCODE, "QR Code Tools", "Generate and scan QR codes easily.", "FaQrcode", "text-green-600"),
    _meta(Category.BARCODE, "Barcode Tools", "Generate and read barcodes quickly.", "FaBarcode", "text-gray-700"),
    _meta(Category.UNIT_CONVERTER, "Unit Converter", "Convert units across categories instantly.", "FaBalanceScale", "text-blue-600"),
    _meta(Category.CURRENCY, "Currency Tools", "Convert currencies with real-time rates.", "FaDollarSign", "text-green-700"),
    _meta(Category.TIMESTAMP, "Timestamp Tools", "Convert and format timestamps.", "FaClock", "text-orange-600"),
    _meta(Category.AI, "AI Tools", "AI-powered tools and generators.", "FaRobot", "text-sky-500"),
    _meta(Category.UX, "UX Tools", "User experience design utilities.", "FaDraftingCompass", "text-teal-600"),
    _meta(Category.HTML, "HTML Tools", "Validate, format, and edit HTML code.", "FaHtml5", "text-orange-500"),
    _meta(Category.EMAIL, "Email Tools", "Validate and generate emails.", "FaEnvelope", "text-blue-400"),
    _meta(Category.FAVICON, "Favicon Tools", "Generate and manage favicons.", "FaIcons", "text-violet-500"),
    _meta(Category.JSON, "JSON Tools", "Format, validate, and edit JSON data.", "FaBracketsCurly", "text-gray-900"),
    _meta(Category.GIF, "GIF Tools", "Create and optimize GIF animations.", "FaFileImage", "text-pink-600"),
]

# O(1) lookup by key
CATEGORY_META_MAP: Dict[str, CategoryMeta] = {meta.key: meta for meta in CATEGORY_META}
