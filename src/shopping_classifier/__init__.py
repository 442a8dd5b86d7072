"""Shopping query / product relationship classifier front end.

The package is split into:
• ``session``      – the interaction state machine and its data model.
• ``presentation`` – pure label → descriptor mapping and formatting helpers.
• ``client``       – access to the remote classification service.
• ``ui``           – the Streamlit page that renders a session.
"""

__version__ = "0.1.0"
