"""Hypothesis strategies for property-based testing of twofold types."""

from hypothesis import strategies as st

from twofold import Err, Nothing, Ok, Some

# Basic value strategies
integers = st.integers()
texts = st.text(min_size=0, max_size=100)
present = st.one_of(integers, texts, st.booleans(), st.lists(integers, max_size=5))
nullable = st.one_of(st.none(), present)

# Exception strategies
exceptions = st.sampled_from([
    ValueError('test'),
    TypeError('test'),
    RuntimeError('test'),
])

# Error payloads: messages or exceptions
errors = st.one_of(texts, exceptions)

# Container strategies
options = st.one_of(present.map(Some), st.just(Nothing))
results = st.one_of(present.map(Ok), errors.map(Err))
