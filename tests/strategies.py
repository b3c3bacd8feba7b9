"""Hypothesis strategies for property-based testing of fprelude types."""

from hypothesis import strategies as st

from fprelude import Failure, Nothing, Some, Success

# -----------------------------------------------------------------------------
# Basic value strategies
# -----------------------------------------------------------------------------

integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# Any hashable payload, None included
payloads = st.one_of(st.none(), integers, texts, booleans, st.floats(allow_nan=False))

# Exception strategies
exceptions = st.sampled_from([
    ValueError('test'),
    TypeError('test'),
    RuntimeError('test'),
])

# -----------------------------------------------------------------------------
# Option and Result strategies
# -----------------------------------------------------------------------------

somes = st.builds(Some, integers)
options = st.one_of(somes, st.just(Nothing))

successes = st.builds(Success, integers)
failures = st.builds(Failure, texts)
results = st.one_of(successes, failures)

result_lists = st.lists(results, max_size=20)
