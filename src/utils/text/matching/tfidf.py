"""TF-IDF corpus index + cosine similarity.

idf(t) = ln((1 + N) / (1 + df(t))) + 1   (smoothed, always >= 1)
tf(t, d) = raw count of t in d
vector(d) = L2-normalized tf * idf

scikit-learn의 TfidfVectorizer(smooth_idf=True, norm="l2")가 정확히 위 식을
구현하므로 토크나이저만 주입해서 사용합니다.

인덱스는 한 번의 랭킹 요청(후보 풀) 범위에서만 유효합니다. 다른 풀에 대해
만들어진 인덱스를 재사용하는 것은 호출자 오류이며 런타임에 검사하지 않습니다
(결과 미정의). 풀이 바뀌면 build_index를 다시 호출하세요.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity

from src.core.logging import logger
from src.utils.hash_utils import generate_corpus_fingerprint
from src.utils.resource_loader import load_stopwords

from ..core.tokenize import tokenize_keywords
from ..normalization.synonyms import canonicalize_token


def analyze(text: str | None) -> list[str]:
    """TF-IDF 토큰: 정규화 -> 불용어 제거 -> 동의어 canonical 치환"""
    return [canonicalize_token(t) for t in tokenize_keywords(text, load_stopwords())]


@dataclass(frozen=True)
class CorpusIndex:
    """후보 풀 하나에 대한 TF-IDF 상태 (빌드 후 읽기 전용)"""

    document_frequencies: Mapping[str, int]
    total_docs: int
    fingerprint: str
    vectorizer: Optional[TfidfVectorizer] = None

    @property
    def vocabulary_size(self) -> int:
        return len(self.document_frequencies)

    def document_frequency(self, term: str) -> int:
        return self.document_frequencies.get(term, 0)

    def idf(self, term: str) -> float:
        """평활 idf. 코퍼스에 없는 용어도 df=0으로 계산됩니다."""
        return math.log((1 + self.total_docs) / (1 + self.document_frequency(term))) + 1.0

    def vector(self, text: str | None) -> dict[str, float]:
        """term -> L2 정규화된 tf*idf (코퍼스에 없는 용어는 제외)"""
        if self.vectorizer is None:
            return {}
        row = self.vectorizer.transform([text or ""])
        features = self.vectorizer.get_feature_names_out()
        return {str(features[j]): float(v) for j, v in zip(row.indices, row.data)}

    def similarity(self, text1: str | None, text2: str | None) -> float:
        """두 텍스트의 코사인 유사도 (0~1로 clamp, 빈 문서/공통 어휘 없음 -> 0)"""
        if self.vectorizer is None:
            return 0.0

        matrix = self.vectorizer.transform([text1 or "", text2 or ""])
        if matrix[0].nnz == 0 or matrix[1].nnz == 0:
            return 0.0

        sim = float(cosine_similarity(matrix[0], matrix[1])[0, 0])
        return _clamp_unit(sim)

    def similarities(self, query: str | None, documents: Sequence[str]) -> list[float]:
        """query 대비 여러 문서의 유사도 (일괄 계산)"""
        if self.vectorizer is None or not documents:
            return [0.0] * len(documents)

        q = self.vectorizer.transform([query or ""])
        if q.nnz == 0:
            return [0.0] * len(documents)

        docs = self.vectorizer.transform([d or "" for d in documents])
        sims = cosine_similarity(q, docs)[0]
        return [_clamp_unit(float(s)) for s in sims]


def _clamp_unit(value: float) -> float:
    # 음수는 비음수 가중치에서 나올 수 없지만 부동소수 오차/NaN 대비
    if not math.isfinite(value) or value <= 0.0:
        return 0.0
    if value >= 1.0:
        return 1.0
    return value


def build_index(descriptions: Sequence[str]) -> CorpusIndex:
    """후보 설명(+ 쿼리 설명) 코퍼스로 인덱스를 만듭니다.

    Args:
        descriptions: 문서 텍스트 목록. 쿼리 설명도 포함해야 idf에 반영됩니다.

    Returns:
        CorpusIndex (읽기 전용)
    """
    docs = [d or "" for d in descriptions]

    df: Counter[str] = Counter()
    for doc in docs:
        df.update(set(analyze(doc)))

    fingerprint = generate_corpus_fingerprint(docs)

    if not df:
        logger.debug(f"[tfidf] Empty vocabulary (docs={len(docs)}), all similarities are 0")
        return CorpusIndex(document_frequencies={}, total_docs=len(docs), fingerprint=fingerprint)

    vectorizer = TfidfVectorizer(
        analyzer=analyze,
        use_idf=True,
        smooth_idf=True,
        sublinear_tf=False,
        norm="l2",
        dtype=np.float64,
    )
    vectorizer.fit(docs)

    logger.debug(f"[tfidf] Index built: docs={len(docs)} vocabulary={len(df)}")
    return CorpusIndex(
        document_frequencies=dict(df),
        total_docs=len(docs),
        fingerprint=fingerprint,
        vectorizer=vectorizer,
    )
