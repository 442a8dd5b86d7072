"""UI components for the Streamlit app.

Each module inside `ui` should focus purely on presentation / user interaction
logic, delegating state transitions to the `session` package and remote calls
to the `client` package.
"""
