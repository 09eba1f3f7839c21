"""
Пакет barcoders
===============

Кодировщик штрихкодов Code128: текст -> последовательность модулей.

Этот пакет предоставляет:
    - Разбор текста с директивами наборов символов (\\a, \\b, \\c, \\\\)
    - Наборы A, B и C (пары цифр с двойной плотностью)
    - Контрольную сумму по модулю 103
    - Полный поток модулей: старт, данные, переключения, контрольная
      сумма, стоп и завершающий модуль

Пример базового использования:
    >>> from barcoders import Code128, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> barcode = Code128("\\\\aHE\\\\c1234")
    >>> modules = barcode.encode()
    >>> logger.info("Сгенерировано %d модулей", len(modules))

Управление конфигурацией:
    >>> import os
    >>> os.environ['BARCODERS_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from barcoders import load_config, Code128
    >>>
    >>> config = load_config()
    >>> barcode = Code128.from_config("HELLO", config)

Версия: 0.1.0
Лицензия: MIT
Python: 3.11+
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "barcoders developers"
__description__ = "Code128 barcode encoder producing module-level bit sequences"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

_PACKAGE_LOGGER = "barcoders"
_LOG_LEVEL_ENV = "BARCODERS_LOG_LEVEL"

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

_LEVELS = {
    name: getattr(logging, name) for name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
}
_LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s"


def _setup_logging() -> None:
    """Один stderr-обработчик (WARNING+) на логгер ``barcoders``; повторный вызов ничего не меняет."""
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    if package_logger.handlers:
        return

    level_name = os.environ.get(_LOG_LEVEL_ENV, "INFO").upper()
    package_logger.setLevel(_LEVELS.get(level_name, logging.INFO))

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён ``barcoders``.

    Аргументы:
        module_name: Обычно ``__name__`` вызывающего модуля.

    Возвращает:
        Экземпляр logging.Logger с именем ``barcoders.<module_name>``.

    Пример:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Значение переменной: %s", some_value)
    """
    if module_name == _PACKAGE_LOGGER or module_name.startswith(_PACKAGE_LOGGER + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{_PACKAGE_LOGGER}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{_PACKAGE_LOGGER}.{clean_name}")


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "default_charset": "A",
}

_DEFAULT_CONFIG_FILE = "barcoders.json"


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Настройки кодировщика: значения по умолчанию, поверх них JSON-объект
    из ``config_path`` (по умолчанию ``barcoders.json`` в текущем каталоге).

    Единственный используемый ключ: ``default_charset`` ("A", "B" или "C").
    Битый файл не прерывает работу: предупреждение и значения по умолчанию.
    """
    logger = get_logger(__name__)
    path = config_path if config_path is not None else Path(_DEFAULT_CONFIG_FILE)
    config = dict(_DEFAULT_CONFIG)

    if not path.exists():
        logger.debug("%s отсутствует, набор по умолчанию: %s", path, config["default_charset"])
        return config

    try:
        user_config = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("%s пропущен (%s); настройки по умолчанию", path, e)
        return config

    if not isinstance(user_config, dict):
        logger.warning(
            "%s пропущен: ожидался JSON-объект, а не %s", path, type(user_config).__name__
        )
        return config

    config.update(user_config)
    logger.debug("Настройки из %s: %s", path, config)
    return config


# =============================================================================
# ИНИЦИАЛИЗАЦИЯ ПАКЕТА
# =============================================================================

_setup_logging()

from .error import BarcodeError, CharacterError, ErrorKind, LengthError  # noqa: E402
from .model.enums import Charset  # noqa: E402
from .sym.code128 import Code128, Unit, charset_from_config, checksum, encode_units, parse  # noqa: E402
from .sym.helpers import collapse_bits, join_slices  # noqa: E402

__all__ = [
    # Метаданные версии
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    "charset_from_config",
    "collapse_bits",
    "join_slices",
    # Ошибки
    "BarcodeError",
    "CharacterError",
    "LengthError",
    "ErrorKind",
    # Code128
    "Charset",
    "Unit",
    "Code128",
    "parse",
    "checksum",
    "encode_units",
]

get_logger(__name__).debug(f"barcoders v{__version__} инициализирован")
