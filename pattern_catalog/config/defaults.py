# pattern_catalog/config/defaults.py
from typing import Any, Dict

ENV_PREFIX = "PATTERN_CATALOG_"

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "logging": {
        "level": "${PATTERN_CATALOG_LOG_LEVEL:WARNING}",
        "destination": "${PATTERN_CATALOG_LOG_DESTINATION:stdout}",
        "file_path": "${PATTERN_CATALOG_LOG_DIR:logs}/pattern_catalog.log",
        "max_size_mb": 10,
        "backup_count": 5,
    },
    "output": {
        "format": "${PATTERN_CATALOG_OUTPUT_FORMAT:list}",
    },
}
