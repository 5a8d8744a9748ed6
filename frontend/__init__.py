"""
CodeSensei client: XP/level overlay, review client and the Streamlit page.
"""
