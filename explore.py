# explore.py
import pandas as pd
import streamlit as st

from score_functions import (
    ContentLocation,
    DeprecatedNameError,
    Match,
    NameField,
    NameMatchPolicy,
    NameNotRegistered,
    ScoreFunctionsRegistry,
    default_policy,
)

st.set_page_config(page_title="Score function registry", layout="wide")
st.title("Score function registry")


def _placeholder(kind: str):
    # Stand-in parsers: the explorer only shows which one a name resolves to
    def parse(*_args, **_kwargs):
        raise NotImplementedError(f"'{kind}' parser is not wired into the explorer")

    parse.__name__ = f"parse_{kind}"
    return parse


SAMPLE_FIELDS = [
    NameField("script_score").with_deprecation("scriptScore"),
    NameField("field_value_factor").with_deprecation("fieldValueFactor"),
    NameField("random_score").with_deprecation("randomScore"),
    NameField("weight"),
    NameField("gauss"),
    NameField("exp"),
    NameField("linear"),
    NameField("boost_factor").with_all_deprecated("weight"),
]


@st.cache_resource(show_spinner=False)
def sample_registry() -> ScoreFunctionsRegistry:
    return ScoreFunctionsRegistry.from_entries((f, _placeholder(f.name)) for f in SAMPLE_FIELDS)


registry = sample_registry()

with st.sidebar:
    st.write("Registered names:", len(registry))
    handling_names = ["strict", "lenient", "silent"]
    default_handling = default_policy().handling.value
    handling = st.radio("Deprecation handling", handling_names, index=handling_names.index(default_handling))

rows = [
    {
        "key": key,
        "canonical": registry.field(key).name,
        "deprecated": ", ".join(registry.field(key).deprecated_names),
        "replaced by": registry.field(key).all_replaced_with or "",
        "match": registry.field(key).match(key).value,
    }
    for key in registry.names()
]
st.dataframe(pd.DataFrame(rows), use_container_width=True)

name = st.text_input("Function name", value="field_value_factor")
if name:
    policy = NameMatchPolicy.from_setting(handling)
    location = ContentLocation(1, 1)
    try:
        handler = registry.resolve(name, policy, location)
    except NameNotRegistered as e:
        st.error(str(e))
    except DeprecatedNameError as e:
        st.warning(str(e))
    else:
        field = registry.field(name)
        if field.match(name) is Match.DEPRECATED and handling == "lenient":
            st.info(field.deprecation_message(name))
        st.success(f"[{name}] resolves to {handler.__name__}")
