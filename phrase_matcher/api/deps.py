# 依赖注入（获取进程内的短语匹配管理器）
from phrase_matcher.matcher.manager import PhraseMatcherManager, get_phrase_manager


def get_manager() -> PhraseMatcherManager:
    return get_phrase_manager()
