# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from envelope.config import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Hybrid Envelope", page_icon="🔐", layout="centered")

st.title("🔐 Hybrid Envelope")
st.write(
    "Consola para el sobre híbrido: el contenido se cifra con AES-256-GCM y la "
    "clave AES se envuelve con RSA-OAEP (SHA-256)."
)
st.info("Empieza en **Generar Claves** para crear el par RSA de la sesión.")
