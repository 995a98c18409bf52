import os
import json
import streamlit as st
from dotenv import load_dotenv
from polyroots import Expression, Solver
from polyroots.formatters import json_float, paraphrase_roots

load_dotenv()
DEFAULT_VARIABLE = os.getenv("DEFAULT_VARIABLE", "x")
DEFAULT_FORMULA = os.getenv("DEFAULT_FORMULA", "3x^2+4x+1")

st.set_page_config(page_title="polyroots", page_icon="🧮", layout="centered")
st.title("Quadratic Solver 🧮")

with st.sidebar:
    st.markdown("### Settings")
    variable = st.text_input("Variable", value=DEFAULT_VARIABLE, key="variable")
    st.markdown("---")
    st.markdown("Write subtraction as a negative term: `x^2+-4`.")

formula = st.text_input("Formula", value=DEFAULT_FORMULA, key="formula")

if st.button("Solve", type="primary"):
    if not formula.strip() or not variable.strip():
        st.warning("Please enter a formula and a variable.")
    else:
        res = Solver().solve(Expression(variable=variable.strip(), formula=formula))
        if res.ok:
            st.success(paraphrase_roots(res))
            st.markdown("### Roots")
            st.write({"root1": json_float(res.roots[0]), "root2": json_float(res.roots[1])})
            st.markdown("### Coefficients")
            st.write({f"{variable}^{e}": c for e, c in sorted(res.coefficients.items())})
        else:
            st.error(res.error)
        st.markdown("### Steps")
        for s in res.steps:
            st.write("- ", s)
        with st.expander("Trace"):
            st.code(json.dumps(res.trace, indent=2, default=str), language="json")
