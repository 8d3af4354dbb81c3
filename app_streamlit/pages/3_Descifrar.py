# --------------------------------------------------------------
# File: 3_Descifrar.py
# Description: Descifra un registro híbrido con la clave privada RSA.
# --------------------------------------------------------------

import streamlit as st
from pydantic import ValidationError

from envelope.errors import EnvelopeError
from envelope.models import WireRecord
from envelope_api.services import decrypt_payload

st.title("🔓 Descifrar")

record_json = st.text_area(
    "Registro JSON ({contentEncrypt, aseKeyEncrypt}):",
    value=st.session_state.get("last_record", ""),
    height=150,
)
private_pem = st.text_area(
    "Clave privada PEM:",
    value=st.session_state.get("private_pem", ""),
    height=200,
)

if st.button("Descifrar"):
    try:
        record = WireRecord.from_json(record_json)
    except ValidationError as exc:
        st.error(f"Registro inválido: {exc}")
        st.stop()

    try:
        plaintext = decrypt_payload(record, private_pem)
    except (EnvelopeError, UnicodeDecodeError) as exc:
        # Cada tipo de error identifica la fase que falló; UnicodeDecodeError
        # indica un contenido auténtico que no es texto UTF-8.
        st.error(f"{type(exc).__name__}: {exc}")
        st.stop()

    st.success("Registro descifrado correctamente.")
    st.code(plaintext, language="text")
