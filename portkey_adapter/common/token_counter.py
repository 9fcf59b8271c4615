"""
Token Counter Module

Estimates token counts for backends without a token counting endpoint.
"""

import math

from portkey_adapter.common.normalizer import join_text
from portkey_adapter.domain.content import NormalizedMessage


class TokenEstimator:
    """
    Character-ratio token estimator

    Not a tokenizer: assumes an average of four characters per token and
    rounds up. Callers get no flag telling an estimate from an exact count.
    """

    CHARS_PER_TOKEN = 4

    def count_tokens(self, text: str) -> int:
        """
        Estimate tokens in text

        Args:
            text: Text to count

        Returns:
            int: ceil(len(text) / 4), 0 for empty text
        """
        if not text:
            return 0
        return math.ceil(len(text) / self.CHARS_PER_TOKEN)

    def count_messages(self, messages: list[NormalizedMessage]) -> int:
        """
        Estimate tokens in a message list

        Message texts are concatenated without separators before estimating.
        """
        return self.count_tokens(join_text(messages))


_estimator = TokenEstimator()


def get_token_estimator() -> TokenEstimator:
    return _estimator
