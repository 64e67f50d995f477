"""Calculator dispatch: language selection and a per-language reuse cache."""

from __future__ import annotations

import logging
import threading
from pathlib import PurePath
from typing import Dict, List, Optional

from ..exceptions import UnsupportedLanguageError
from ..languages import Language
from .base import ComplexityCalculator
from .java import JavaCalculator
from .mos6502 import Mos6502Calculator
from .x86 import X86Calculator

logger = logging.getLogger(__name__)


def create_calculator(language: Language) -> ComplexityCalculator:
    """Return a new calculator for ``language``."""
    if language is Language.JAVA:
        return JavaCalculator()
    elif language is Language.X86:
        return X86Calculator()
    elif language is Language.MOS6502:
        return Mos6502Calculator()
    raise UnsupportedLanguageError(str(language), Language.all_keys())


class CalculatorRegistry:
    """Resolves languages and hands out cached calculator instances.

    Calculators keep no per-call state, so a cached instance can serve
    concurrent callers; the lock only guards cache population.
    """

    def __init__(self) -> None:
        self._cache: Dict[Language, ComplexityCalculator] = {}
        self._lock = threading.Lock()

    def get_calculator(self, language: Language) -> ComplexityCalculator:
        with self._lock:
            calculator = self._cache.get(language)
            if calculator is None:
                calculator = create_calculator(language)
                self._cache[language] = calculator
                logger.debug(f"Created {type(calculator).__name__} for {language.key}")
            return calculator

    def resolve_language(
        self,
        language_key: Optional[str] = None,
        file_path: Optional[str] = None,
    ) -> Language:
        """Pick a language from an explicit key, else from the file extension.

        Raises:
            UnsupportedLanguageError: If the key is unknown or the extension
                matches no language
        """
        if language_key is not None and language_key.strip():
            language = Language.from_key(language_key)
            if language is None:
                raise UnsupportedLanguageError(language_key.strip().lower(), self.supported_keys())
            return language

        if file_path:
            language = Language.from_path(file_path)
            if language is not None:
                return language
            suffix = PurePath(file_path).suffix or "<no extension>"
            raise UnsupportedLanguageError(
                f"file with extension '{suffix}'", self.supported_keys()
            )

        raise UnsupportedLanguageError("<none>", self.supported_keys())

    def supported_keys(self) -> List[str]:
        return Language.all_keys()
