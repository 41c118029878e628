"""入力のフィンガープリントをキーとするValidationReportのTTL付きキャッシュ。"""

import hashlib
import json
import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable

from pydantic import BaseModel

from brandcheck.models.brand import BrandConfig
from brandcheck.models.validation import ValidationContext, ValidationReport

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0
DEFAULT_MAX_ENTRIES = 256


class CacheStats(BaseModel):
    """キャッシュの利用状況。"""

    hits: int
    misses: int
    evictions: int
    size: int


def fingerprint(config: BrandConfig, context: ValidationContext, registry_version: int = 0) -> str:
    """検証結果に影響する入力から決定的なキーを生成する。

    設定内容とcontextのstrictness/industry/audience、レジストリのバージョンを
    キー順を固定した正規化JSONにしてSHA-256を取る。フィールドの定義順には依存しない。
    """
    payload = {
        "config": config.model_dump(mode="json"),
        "context": {
            "strictness": context.strictness,
            "industry": context.industry,
            "audience": context.audience,
        },
        "registry_version": registry_version,
    }
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class ValidationCache:
    """ValidationReportのメモ化。

    エントリはTTL経過後に失効し、次回アクセス時に透過的に再計算される。
    キャッシュの有無で結果（timestampを除く）は変わらない。
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: OrderedDict[str, tuple[float, ValidationReport]] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, key: str) -> ValidationReport | None:
        """有効なエントリの複製を返す。存在しないか失効している場合はNone。

        呼び出し側での変更が他の呼び出しに影響しないよう、毎回deep copyを返す。
        """
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                logger.debug("Validation cache miss: %s", key[:12])
                return None
            stored_at, report = entry
            if now - stored_at >= self._ttl:
                del self._entries[key]
                self._misses += 1
                logger.debug("Validation cache entry expired: %s", key[:12])
                return None
            self._hits += 1
        logger.debug("Validation cache hit: %s", key[:12])
        return report.model_copy(deep=True)

    def put(self, key: str, report: ValidationReport) -> None:
        """エントリを保存する。上限を超えた場合は最も古いエントリから削除する。"""
        now = self._clock()
        stored = report.model_copy(deep=True)
        with self._lock:
            self._entries[key] = (now, stored)
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                self._evictions += 1
                logger.debug("Validation cache evicted: %s", evicted[:12])

    def get_or_compute(self, key: str, compute: Callable[[], ValidationReport]) -> ValidationReport:
        """キャッシュにあればそれを返し、なければ計算して保存する。

        計算はロックの外で行うため、同一キーの同時計算はあり得るが結果は同一になる。
        """
        cached = self.get(key)
        if cached is not None:
            return cached
        report = compute()
        self.put(key, report)
        return report

    def reports(self) -> list[ValidationReport]:
        """失効していないエントリのレポート一覧。"""
        now = self._clock()
        with self._lock:
            live = [report for stored_at, report in self._entries.values() if now - stored_at < self._ttl]
        return [report.model_copy(deep=True) for report in live]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(hits=self._hits, misses=self._misses, evictions=self._evictions, size=len(self._entries))
