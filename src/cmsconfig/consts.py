"""Constants for the CMS config service"""

# ==================== Widgets ====================
WIDGET_STRING = "string"
WIDGET_TEXT = "text"
WIDGET_MARKDOWN = "markdown"
WIDGET_BOOLEAN = "boolean"
WIDGET_NUMBER = "number"
WIDGET_DATETIME = "datetime"
WIDGET_FILE = "file"
WIDGET_IMAGE = "image"
WIDGET_OBJECT = "object"
WIDGET_LIST = "list"
WIDGET_CODE = "code"

# ==================== i18n Modes ====================
I18N_DUPLICATE = "duplicate"

# ==================== Collection Defaults ====================
CONTENT_ROOT = "/content"
FOLDER_EXTENSION = "json"
FOLDER_IDENTIFIER_FIELD = "titulo"  # change per collection if it has no "titulo" field

# ==================== Datetime Formats ====================
DATE_FORMAT = "DD/MM/YYYY"
TIME_FORMAT = "HH:mm"
DATETIME_FORMAT = "YYYY-MM-DDTHH:mm:ssZ"

# ==================== Code Widget ====================
CODE_DEFAULT_LANGUAGE = "html"

# ==================== Document Defaults ====================
LOCALE_DEFAULT = "pt"
BACKEND_NAME_DEFAULT = "git-gateway"
BACKEND_BRANCH_DEFAULT = "main"
MEDIA_FOLDER_DEFAULT = "/public/uploads"
PUBLIC_FOLDER_DEFAULT = "/uploads"

# ==================== Runtime Modes ====================
ENV_DEVELOPMENT = "development"
ENV_PRODUCTION = "production"

# ==================== HTTP ====================
CONFIG_ROUTE = "/admin/config.yml"
YAML_CONTENT_TYPE = "text/yaml"
