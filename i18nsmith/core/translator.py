"""Translation providers (DeepL, OpenAI, offline pseudo-localization) + retry/cache manager."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

import aiohttp

from .exceptions import TranslationError


class TranslationEngine(Enum):
    DEEPL = "deepl"
    OPENAI = "openai"
    PSEUDO = "pseudo"


@dataclass
class TranslationRequest:
    text: str
    source_lang: str
    target_lang: str
    engine: TranslationEngine
    metadata: Dict = field(default_factory=dict)


@dataclass
class TranslationResult:
    original_text: str
    translated_text: str
    source_lang: str
    target_lang: str
    engine: TranslationEngine
    success: bool
    error: Optional[str] = None
    metadata: Dict = field(default_factory=dict)


LANGUAGE_NAMES = {
    'en': 'English',
    'fr': 'French',
    'es': 'Spanish',
    'de': 'German',
    'it': 'Italian',
    'pt': 'Portuguese',
    'nl': 'Dutch',
    'pl': 'Polish',
    'ru': 'Russian',
    'ja': 'Japanese',
    'zh': 'Chinese',
    'ko': 'Korean',
}


def language_name(code: str) -> str:
    """'fr' -> 'French'; unknown codes come back upper-cased."""
    return LANGUAGE_NAMES.get(code.lower(), code.upper())


class BaseTranslator(ABC):
    engine: TranslationEngine

    def __init__(self, api_key: Optional[str] = None, timeout: int = 30):
        self.api_key = api_key
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self):
        if self._session:
            try:
                await self._session.close()
            except Exception as e:
                self.logger.debug(f"Error closing session: {e}")
            self._session = None

    async def _post_json(self, url: str, **kwargs):
        session = await self._get_session()
        async with session.post(url, **kwargs) as resp:
            if resp.status == 200:
                return await resp.json(content_type=None)
            body = await resp.text()
            raise TranslationError(f"{self.engine.value} API error (HTTP {resp.status}): {body}")

    def _result(self, request: TranslationRequest, translated: str, success: bool = True,
                error: Optional[str] = None) -> TranslationResult:
        return TranslationResult(
            request.text, translated, request.source_lang, request.target_lang,
            self.engine, success, error, metadata=request.metadata,
        )

    @abstractmethod
    async def translate_single(self, request: TranslationRequest) -> TranslationResult: ...

    async def translate(self, text: str, target_lang: str, source_lang: str = "auto") -> str:
        """Translate one string or raise TranslationError."""
        result = await self.translate_single(
            TranslationRequest(text, source_lang, target_lang, self.engine)
        )
        if not result.success:
            raise TranslationError(result.error or "translation failed")
        return result.translated_text


class DeepLTranslator(BaseTranslator):
    engine = TranslationEngine.DEEPL
    api_url = "https://api.deepl.com/v2/translate"
    free_api_url = "https://api-free.deepl.com/v2/translate"

    @property
    def endpoint(self) -> str:
        # Free-plan keys end with ":fx" and live on a separate host
        if self.api_key and self.api_key.endswith(":fx"):
            return self.free_api_url
        return self.api_url

    async def translate_single(self, request: TranslationRequest) -> TranslationResult:
        if not self.api_key:
            return self._result(request, "", False, "API key required")

        payload = {'text': [request.text], 'target_lang': request.target_lang.upper()}
        if request.source_lang and request.source_lang != 'auto':
            payload['source_lang'] = request.source_lang.upper()
        headers = {'Authorization': f"DeepL-Auth-Key {self.api_key}"}

        try:
            data = await self._post_json(self.endpoint, json=payload, headers=headers)
            translations = (data or {}).get('translations') or []
            if not translations:
                return self._result(request, "", False, "DeepL returned no translations")
            return self._result(request, translations[0].get('text', ''))
        except Exception as e:
            return self._result(request, "", False, str(e))


class OpenAITranslator(BaseTranslator):
    engine = TranslationEngine.OPENAI
    api_url = "https://api.openai.com/v1/chat/completions"
    model = "gpt-3.5-turbo"
    temperature = 0.3

    def build_payload(self, text: str, target_lang: str) -> Dict:
        system_prompt = (
            f"You are a professional translator. Translate the following text to "
            f"{language_name(target_lang)}. Return only the translated text, no "
            f"explanations, no markdown formatting."
        )
        return {
            'model': self.model,
            'messages': [
                {'role': 'system', 'content': system_prompt},
                {'role': 'user', 'content': text},
            ],
            'temperature': self.temperature,
        }

    async def translate_single(self, request: TranslationRequest) -> TranslationResult:
        if not self.api_key:
            return self._result(request, "", False, "API key required")

        headers = {'Authorization': f"Bearer {self.api_key}"}
        try:
            data = await self._post_json(
                self.api_url, json=self.build_payload(request.text, request.target_lang), headers=headers
            )
            choices = (data or {}).get('choices') or []
            if not choices:
                return self._result(request, "", False, "OpenAI returned no choices")
            content = choices[0].get('message', {}).get('content', '')
            return self._result(request, content.strip())
        except Exception as e:
            return self._result(request, "", False, str(e))


class PseudoTranslator(BaseTranslator):
    """Offline pseudo-localization for checking layouts without a provider.

    mode: "accents" (Save -> Šàvé), "brackets" ([!!! Save !!!]) or "both".
    """
    engine = TranslationEngine.PSEUDO

    ACCENT_MAP = str.maketrans({
        'a': 'à', 'e': 'é', 'i': 'î', 'o': 'ö', 'u': 'ü', 'c': 'ç', 'n': 'ñ', 's': 'š', 'y': 'ý',
        'A': 'À', 'E': 'É', 'I': 'Î', 'O': 'Ö', 'U': 'Ü', 'C': 'Ç', 'N': 'Ñ', 'S': 'Š', 'Y': 'Ý',
    })

    def __init__(self, mode: str = "both", **kwargs):
        super().__init__(**kwargs)
        if mode not in ("accents", "brackets", "both"):
            raise TranslationError(f"Unknown pseudo mode: {mode}")
        self.mode = mode

    def _apply_pseudo(self, text: str) -> str:
        result = text
        if self.mode in ("accents", "both"):
            result = result.translate(self.ACCENT_MAP)
        if self.mode in ("brackets", "both"):
            result = f"[!!! {result} !!!]"
        return result

    async def translate_single(self, request: TranslationRequest) -> TranslationResult:
        return self._result(request, self._apply_pseudo(request.text))


class TranslationManager:
    """Routes requests to registered translators with retries and a small LRU cache."""

    def __init__(self, max_retries: int = 1, retry_delay: float = 0.2, cache_capacity: int = 5000):
        self.logger = logging.getLogger(__name__)
        self.translators: Dict[TranslationEngine, BaseTranslator] = {}
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.cache_capacity = cache_capacity
        self._cache: OrderedDict = OrderedDict()
        self.cache_hits = 0
        self.cache_misses = 0

    def add_translator(self, translator: BaseTranslator):
        self.translators[translator.engine] = translator

    async def close_all(self):
        tasks = [t.close() for t in self.translators.values()]
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    def _cache_get(self, key: Tuple[str, str, str, str]) -> Optional[TranslationResult]:
        val = self._cache.get(key)
        if val:
            self._cache.move_to_end(key)
        return val

    def _cache_put(self, key: Tuple[str, str, str, str], val: TranslationResult):
        if not val.success:
            return
        self._cache[key] = val
        self._cache.move_to_end(key)
        if len(self._cache) > self.cache_capacity:
            self._cache.popitem(last=False)

    async def translate_with_retry(self, req: TranslationRequest) -> TranslationResult:
        tr = self.translators.get(req.engine)
        if not tr:
            return TranslationResult(req.text, "", req.source_lang, req.target_lang, req.engine, False,
                                     f"Translator {req.engine.value} not available")
        key = (req.engine.value, req.source_lang, req.target_lang, req.text)
        cached = self._cache_get(key)
        if cached:
            self.cache_hits += 1
            return cached
        self.cache_misses += 1

        last_err = None
        for attempt in range(self.max_retries + 1):
            try:
                res = await tr.translate_single(req)
                if res.success:
                    self._cache_put(key, res)
                    return res
                last_err = res.error
            except Exception as e:
                last_err = str(e)
            if attempt < self.max_retries:
                await asyncio.sleep(self.retry_delay)
        return TranslationResult(req.text, "", req.source_lang, req.target_lang, req.engine, False,
                                 f"Failed: {last_err}")

    def get_cache_stats(self) -> Dict[str, float]:
        total = self.cache_hits + self.cache_misses
        hit_rate = (self.cache_hits / total * 100) if total else 0.0
        return {'size': len(self._cache), 'capacity': self.cache_capacity,
                'hits': self.cache_hits, 'misses': self.cache_misses, 'hit_rate': round(hit_rate, 2)}


def create_translator(engine: TranslationEngine, api_key: Optional[str] = None, **kwargs) -> BaseTranslator:
    if engine is TranslationEngine.DEEPL:
        return DeepLTranslator(api_key=api_key, **kwargs)
    if engine is TranslationEngine.OPENAI:
        return OpenAITranslator(api_key=api_key, **kwargs)
    return PseudoTranslator(**kwargs)
