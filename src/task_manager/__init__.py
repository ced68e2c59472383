"""Task manager: a FastAPI task store service and a Streamlit client UI."""

__version__ = "1.0.0"
