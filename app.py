#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Style - Flask Web Application

Thin HTTP front end over the qrstyle renderer.

Run:
    python app.py
Open:
    http://127.0.0.1:5000/
"""

import logging
import os
from dataclasses import replace
from io import BytesIO
from typing import Optional, Tuple

import segno
from flask import Flask, render_template_string, request, send_file
from PIL import UnidentifiedImageError

from qrstyle import decode_payload, render, style_from_params
from qrstyle.logo import load_logo
from qrstyle.config import ConfigurationError, DotType
from qrstyle.qr_generator import encode_with_options

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TEMPLATE = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>QR Style</title>
  <style>
    body{font-family:Inter, Arial, sans-serif; padding:18px; background:#fff; color:#222}
    .row{display:flex; flex-wrap:wrap; gap:16px; align-items:flex-end}
    .field{display:flex; flex-direction:column; font-size:14px}
    input[type="text"], select, input[type="number"]{padding:6px 8px; font-family:monospace; border:1px solid #ccc; border-radius:6px}
    label{font-weight:600; margin-bottom:4px}
    button{padding:10px 16px; border-radius:8px; border:1px solid #333; background:#111; color:#fff; cursor:pointer}
  </style>
</head>
<body>
  <h1>QR Style</h1>
  <form method="post" action="/svg" enctype="multipart/form-data">
    <div class="row">
      <div class="field" style="flex:1 1 100%">
        <label>Text</label>
        <input type="text" name="text" placeholder="https://example.com">
      </div>
    </div>
    <div class="row">
      <div class="field">
        <label>ECC</label>
        <select name="ec">
          {% for v in ['l','m','q','h'] %}<option value="{{v}}" {% if v=='q' %}selected{% endif %}>{{v|upper}}</option>{% endfor %}
        </select>
      </div>
      <div class="field">
        <label>Dots</label>
        <select name="dots">
          {% for v in dot_types %}<option value="{{v}}">{{v}}</option>{% endfor %}
        </select>
      </div>
      <div class="field"><label>Size</label><input type="number" name="size" value="512"></div>
      <div class="field"><label>Foreground</label><input type="text" name="fg" value="#000000"></div>
      <div class="field"><label>Background</label><input type="text" name="bg" value="#ffffff"></div>
      <div class="field">
        <label>Corners</label>
        <select name="corner_style">
          <option value="">default</option>
          {% for v in ['square','circle','rounded','classy'] %}<option value="{{v}}">{{v}}</option>{% endfor %}
        </select>
      </div>
      <div class="field"><label>Logo</label><input type="file" name="logo_file" accept="image/*"></div>
      <div class="field"><label>Logo hole (px)</label><input type="number" name="hole_radius"></div>
      <button type="submit">Generate SVG</button>
    </div>
  </form>
</body>
</html>
"""

app = Flask(__name__)


def _read_params(req) -> Tuple[str, str, bool]:
    """Extract payload text, payload encoding and download flag from a Flask request."""
    text = (req.values.get('text') or "").strip()
    encoding = (req.values.get('encoding') or "utf8").strip()
    download = (req.values.get('download') or "").strip().lower() == 'true'
    return text, encoding, download


def _read_logo(req) -> Optional[str]:
    """Uploaded logo as a data URI, or None when absent or unreadable."""
    upload = req.files.get('logo_file')
    if upload is None or not upload.filename:
        return None
    try:
        href = load_logo(upload.stream)
        logger.info(f"Logo uploaded: {upload.filename}")
        return href
    except (UnidentifiedImageError, OSError) as ex:
        logger.warning(f"Could not load logo {upload.filename}: {ex}")
        return None


@app.route('/', methods=['GET'])
def index():
    return render_template_string(TEMPLATE, dot_types=[d.value for d in DotType])


@app.route('/svg', methods=['GET', 'POST'])
def export_svg():
    text, encoding, download = _read_params(request)
    if not text:
        return "Missing text", 400

    try:
        config = style_from_params(request.values)
        payload = decode_payload(text, encoding)
    except ConfigurationError as ex:
        logger.warning(f"Rejected parameters: {ex}")
        return str(ex), 400

    logo_href = _read_logo(request)
    if logo_href:
        config = replace(config, logo=replace(config.logo, href=logo_href))

    try:
        matrix = encode_with_options(payload, config.qr)
    except segno.DataOverflowError as ex:
        logger.warning(f"Payload too large: {ex}")
        return f"Payload does not fit: {ex}", 400

    logger.info(f"Rendering {matrix.size}x{matrix.size} QR code "
                f"(ecc={config.qr.ecc.value}, dots={config.modules.type.value})")
    svg = render(matrix, config)
    return send_file(BytesIO(svg.encode('utf-8')), as_attachment=download,
                     download_name='qr.svg', mimetype='image/svg+xml')


if __name__ == "__main__":
    app.run(debug=os.environ.get('QRSTYLE_DEBUG') == '1')
