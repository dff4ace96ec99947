from __future__ import annotations

from typing import List, Tuple

from hypothesis import strategies as st

from slashload.models import Employee

# tokens never contain the delimiter
tokens = st.text(alphabet=st.characters(exclude_characters="/"), max_size=12)

int_literals = st.integers(min_value=-(10**12), max_value=10**12).map(str)


@st.composite
def employees(draw) -> Tuple[Employee, List[str]]:
    name = draw(tokens)
    age = draw(st.integers(min_value=0, max_value=150))
    return Employee(name, age), [name, str(age)]


@st.composite
def string_sequences(draw) -> Tuple[List[str], List[str]]:
    items = draw(st.lists(tokens, max_size=20))
    return items, [str(len(items)), *items]
