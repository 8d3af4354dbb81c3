# --------------------------------------------------------------
# File: 1_Generar_Claves.py
# Description: Genera el par RSA y la clave AES de la sesión de Streamlit.
# --------------------------------------------------------------

import streamlit as st

from envelope.config import RSA_MODULUS_BITS
from envelope.crypto_asym import RECOMMENDED_MODULUS_BITS, rsa_generate_keypair
from envelope.crypto_sym import export_symmetric_key, generate_symmetric_key

st.title("🔑 Generar claves")

options = [1024, 2048, 3072, 4096]
default_index = options.index(RSA_MODULUS_BITS) if RSA_MODULUS_BITS in options else 1
modulus_bits = st.selectbox("Tamaño del módulo RSA (bits):", options, index=default_index)
if modulus_bits < RECOMMENDED_MODULUS_BITS:
    st.warning(f"{modulus_bits} bits está por debajo de lo recomendado ({RECOMMENDED_MODULUS_BITS}).")

if st.button("Generar par RSA"):
    with st.spinner("Generando par RSA..."):
        private_key, public_key = rsa_generate_keypair(modulus_bits)
    st.session_state["public_pem"] = public_key.export_pem()
    st.session_state["private_pem"] = private_key.export_pem()
    st.success(f"Par RSA-{modulus_bits} generado.")

if st.button("Generar clave AES-256"):
    key = generate_symmetric_key()
    st.session_state["aes_key_b64"] = export_symmetric_key(key, "base64")
    st.session_state["aes_key_hex"] = export_symmetric_key(key, "hex")

# Muestra el material disponible en la sesión.
if "public_pem" in st.session_state:
    st.markdown("### Clave pública (SPKI)")
    st.code(st.session_state["public_pem"], language="text")
    st.markdown("### Clave privada (PKCS8)")
    st.code(st.session_state["private_pem"], language="text")

if "aes_key_b64" in st.session_state:
    st.markdown("### Clave AES-256")
    st.write("**Base64:**")
    st.code(st.session_state["aes_key_b64"], language="text")
    st.write("**Hex:**")
    st.code(st.session_state["aes_key_hex"], language="text")
