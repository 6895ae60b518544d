"""Customer messaging — WhatsApp channel, templates, and order webhook relays."""
