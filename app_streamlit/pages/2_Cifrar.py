# --------------------------------------------------------------
# File: 2_Cifrar.py
# Description: Cifra un texto y produce el registro híbrido en JSON.
# --------------------------------------------------------------

import streamlit as st

from envelope.codec import b64decode
from envelope_api.services import encrypt_payload

st.title("🔒 Cifrar")

public_pem = st.text_area(
    "Clave pública PEM del destinatario:",
    value=st.session_state.get("public_pem", ""),
    height=200,
)
aes_key_text = st.text_input(
    "Clave AES (opcional, base64 o hex). Vacío = clave efímera:",
    value="",
)
plaintext = st.text_area("Texto a cifrar:", height=150)

if st.button("Cifrar"):
    if not public_pem.strip():
        st.warning("Necesitas una clave pública. Genérala en **Generar Claves**.")
        st.stop()
    try:
        record = encrypt_payload(plaintext, public_pem, aes_key_text.strip() or None)
    except ValueError as exc:
        # Incluye EnvelopeError y un SYMMETRIC_KEY_FORMAT mal configurado.
        st.error(f"{type(exc).__name__}: {exc}")
        st.stop()

    st.session_state["last_record"] = record.to_json()
    st.success("Contenido cifrado.")
    st.json(record.model_dump(by_alias=True))

    envelope_len = len(b64decode(record.content_encrypt))
    st.caption(
        f"Sobre: {envelope_len} bytes = 12 (IV) + {envelope_len - 28} (ciphertext) + 16 (tag)"
    )
