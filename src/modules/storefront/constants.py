"""Storefront constants: copy, contact details and price tier labels."""

WHATSAPP_NUMBER = "6285852555571"
WHATSAPP_BASE_URL = f"https://wa.me/{WHATSAPP_NUMBER}"
ORDER_MESSAGE_TEMPLATE = "Halo kak aku mau tanya produk {name}"

CONTACT_LABEL = "Hubungi Kami"

DEFAULT_ERROR_MESSAGE = "Product not found"
TRANSPORT_ERROR_MESSAGE = "Error connecting to server"

CURRENCY_SYMBOL = "Rp"
DECIMAL_SEPARATOR = ","
THOUSAND_SEPARATOR = "."

STORE_NAME = "DRW Skincare"
STORE_ADDRESS = "DRW Skincare Pusat Banyuwangi"
STORE_EMAIL = "info@drwskincare.com"
STORE_PHONE = "0858-5255-5571"
