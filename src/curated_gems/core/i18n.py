"""Supported display languages and localized UI strings."""

from typing import Optional

SUPPORTED_LANGUAGES = ("zh", "en", "ja", "ko")
DEFAULT_LANGUAGE = "zh"
FALLBACK_LANGUAGE = "en"

AI_SUMMARY_LABELS = {
    "zh": "AI总结：",
    "en": "AI Summary: ",
    "ja": "AI要約：",
    "ko": "AI 요약：",
}

QUOTE_GLYPHS = {
    "zh": ("「", "」"),
    "ja": ("「", "」"),
    "en": ('"', '"'),
    "ko": ('"', '"'),
}

ALL_FACET_LABELS = {
    "zh": "📚 全部 ({count})",
    "en": "📚 All ({count})",
    "ja": "📚 すべて ({count})",
    "ko": "📚 전체 ({count})",
}

SOURCE_FACET_LABEL = "✨ {source} ({count})"

SEARCH_PLACEHOLDERS = {
    "zh": "🔍 输入关键词搜索精彩内容...",
    "en": "🔍 Enter keywords to search amazing content...",
    "ja": "🔍 キーワードを入力して検索...",
    "ko": "🔍 키워드를 입력해 검색하세요...",
}

EMPTY_TEXTS = {
    "zh": "🤔 暂时没找到，换个词试试？或许有惊喜",
    "en": "🤔 Nothing so far, try a different word. Maybe a surprise awaits.",
    "ja": "🤔 見つかりませんでした。別のキーワードを試してみてください。",
    "ko": "🤔 아직 찾지 못했어요. 다른 단어로 시도해보세요.",
}

LOAD_FAILED_TEXTS = {
    "zh": "数据加载失败，请刷新页面重试",
    "en": "Failed to load data, please try again",
    "ja": "データの読み込みに失敗しました。もう一度お試しください",
    "ko": "데이터를 불러오지 못했습니다. 다시 시도해주세요",
}

ERROR_PREFIXES = {
    "zh": "❌ 错误：",
    "en": "❌ Error: ",
    "ja": "❌ エラー：",
    "ko": "❌ 오류：",
}


def coerce_language(value: Optional[str]) -> str:
    """Normalize a requested language, falling back to the default."""
    lang = (value or "").strip().lower()
    if lang in SUPPORTED_LANGUAGES:
        return lang
    return DEFAULT_LANGUAGE


def localized(table: dict, language: str, fallback: str = DEFAULT_LANGUAGE):
    """Look up a per-language entry with a fallback language."""
    if language in table:
        return table[language]
    return table[fallback]
