"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс LMC_ANALYSER_, вложенность через __)
- Валидация параметров анализа
- Настройка логирования
"""

import math
import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

from .interfaces.analysis import AnalysisConfig, PRESETS, DEFAULT_PRESET

logger = logging.getLogger(__name__)

ENV_PREFIX = 'LMC_ANALYSER_'


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: str = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей директории и выше
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data = {}

        self._load_config()
        self._load_env()
        # Применяем ENV-переопределения и валидацию
        try:
            self._apply_env_overrides()
            self._validate_and_prepare()
        except Exception as e:
            logger.warning(f"Проблема при применении ENV/валидации: {e}")
        self._configure_logging_if_needed()

    # --- Профили/ENV overrides/валидация/логирование ---
    def _resolve_config_path(self) -> Path:
        env = os.getenv(f'{ENV_PREFIX}ENV', '').lower().strip()
        root = self.config_path.parent if self.config_path else Path.cwd()
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            candidate = root / 'config.yaml'
        if candidate.exists():
            return candidate
        # Фолбэк на исходный путь
        return self.config_path

    def _load_config(self):
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        try:
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                self._merge(self.config_data, loaded)
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.warning(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
        except Exception as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = self._get_default_config()

    def _load_env(self):
        """Загружает переменные окружения из .env файла"""
        try:
            load_dotenv()
            logger.debug("Переменные окружения загружены из .env (если есть)")
        except Exception as e:
            logger.error(f"Ошибка загрузки переменных окружения: {e}")

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (LMC_ANALYSER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            # Пропускаем служебные (ENV/DEBUG)
            if key in (f'{ENV_PREFIX}ENV', f'{ENV_PREFIX}DEBUG'):
                continue
            tail = key[len(ENV_PREFIX):]
            # Вложенность разделяется двойным подчёркиванием
            dotted = tail.replace('__', '.').lower()
            # Пытаемся привести числа/булевы
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv(f'{ENV_PREFIX}ENV'):
            logger.info(f"Активирован профиль: {os.getenv(f'{ENV_PREFIX}ENV')}")

    def _validate_and_prepare(self) -> None:
        """Проверяет диапазоны параметров анализа; некорректные заменяет значениями пресета standard."""
        epsilon, threshold, min_length = PRESETS[DEFAULT_PRESET]

        try:
            value = float(self.get('analysis.epsilon', epsilon))
            if not math.isfinite(value) or not value > 0:
                raise ValueError
        except (TypeError, ValueError):
            logger.warning(f"analysis.epsilon должен быть конечным и > 0 — принудительно установлено в {epsilon}")
            self._set_nested(self.config_data, 'analysis.epsilon', epsilon)

        try:
            if not 0.0 <= float(self.get('analysis.similarity_threshold', threshold)) <= 1.0:
                raise ValueError
        except (TypeError, ValueError):
            logger.warning(f"analysis.similarity_threshold вне [0, 1] — принудительно установлено в {threshold}")
            self._set_nested(self.config_data, 'analysis.similarity_threshold', threshold)

        try:
            if int(self.get('analysis.min_content_length', min_length)) < 0:
                raise ValueError
        except (TypeError, ValueError):
            logger.warning(f"analysis.min_content_length < 0 — принудительно установлено в {min_length}")
            self._set_nested(self.config_data, 'analysis.min_content_length', min_length)

        preset = self.get('analysis.preset')
        if preset and str(preset).lower() not in PRESETS:
            logger.warning(f"Неизвестный пресет '{preset}' — используется '{DEFAULT_PRESET}'")
            self._set_nested(self.config_data, 'analysis.preset', DEFAULT_PRESET)

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_lmc_analyser_configured", False) and not force:
            # Проверим, не изменились ли параметры
            if (
                getattr(root, "_lmc_analyser_console_level", None) == console_level_name and
                getattr(root, "_lmc_analyser_file_level", None) == file_level_name and
                getattr(root, "_lmc_analyser_format", None) == desired_fmt and
                getattr(root, "_lmc_analyser_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            # Очищаем старые логи перед созданием нового
            self.cleanup_old_log_files()

            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except Exception as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_lmc_analyser_configured", True)
        setattr(root, "_lmc_analyser_console_level", console_level_name)
        setattr(root, "_lmc_analyser_file_level", file_level_name)
        setattr(root, "_lmc_analyser_format", desired_fmt)
        setattr(root, "_lmc_analyser_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        epsilon, threshold, min_length = PRESETS[DEFAULT_PRESET]
        return {
            'analysis': {
                # Пустой пресет: берутся явные значения ниже
                'preset': None,
                'epsilon': epsilon,
                'similarity_threshold': threshold,
                'min_content_length': min_length,
            },
            # Ограничения формы ввода (применяет вызывающая сторона)
            'input': {
                'max_content_length': 150000,
                'max_name_length': 30,
            },
            'logging': {
                'level': "INFO",
                'format': "%(asctime)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_file': "logs/lmc_analyser.log",
                'max_log_files': 10,
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            keys = key.split('.')
            value = self.config_data

            for k in keys:
                value = value[k]

            return value
        except (KeyError, TypeError):
            return default

    def get_analysis_config(self, preset: Optional[str] = None) -> AnalysisConfig:
        """
        Строит параметры анализа.

        Приоритет: явный preset > analysis.preset > analysis.epsilon/... из конфига.

        Args:
            preset: Имя пресета

        Returns:
            Проверенный AnalysisConfig
        """
        name = preset or self.get('analysis.preset')
        if name:
            return AnalysisConfig.from_preset(str(name))
        return AnalysisConfig(
            epsilon=float(self.get('analysis.epsilon')),
            similarity_threshold=float(self.get('analysis.similarity_threshold')),
            min_content_length=int(self.get('analysis.min_content_length')),
        )

    def get_max_content_length(self) -> int:
        """Максимальная длина текста ответа"""
        return int(self.get('input.max_content_length', 150000))

    def get_max_name_length(self) -> int:
        """Максимальная длина имени ответа"""
        return int(self.get('input.max_name_length', 30))

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        # Поддержка формата logging.level
        return self.get('logging.console_level', self.get('logging.level', "INFO"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def get_logging_file(self) -> str:
        """Путь к файлу лога текущей сессии ({timestamp} заменяется временем запуска)"""
        log_file_template = self.get('logging.log_file', "logs/lmc_analyser.log")
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        if "{timestamp}" in log_file_template:
            return log_file_template.replace("{timestamp}", timestamp)
        path = Path(log_file_template)
        return str(path.with_name(f"{path.stem}_{timestamp}{path.suffix}"))

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return int(self.get('logging.max_log_files', 10))

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        try:
            template = Path(self.get('logging.log_file', "logs/lmc_analyser.log"))
            logs_dir = template.parent
            if not logs_dir.exists():
                return

            stem = template.stem.replace("{timestamp}", "").rstrip("_")
            log_files = list(logs_dir.glob(f"{stem}_*{template.suffix}"))

            max_files = self.get_max_log_files()
            if len(log_files) <= max_files:
                return

            # Сортируем по времени модификации (самые новые последними)
            log_files.sort(key=lambda f: f.stat().st_mtime)

            for old_file in log_files[:-max_files]:
                try:
                    old_file.unlink()
                    logger.debug(f"Удален старый лог файл: {old_file}")
                except OSError as e:
                    logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")

        except OSError as e:
            logger.debug(f"Ошибка при очистке старых логов: {e}")


# Глобальный экземпляр конфигурации
config = Config()
