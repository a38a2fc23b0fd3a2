import io

from flask import Flask, render_template, request, jsonify, send_file

from lithophane.config import BASE, SCALE, LEVELS, DEFAULT_OUTPUT, TEMPLATE_DIR
from lithophane.errors import ImageUnreadable, UnsupportedPixelShape, InvalidSettings
from lithophane.heightmap import build_heightmap
from lithophane.image_io import decode_pixels
from lithophane.pipeline import check_settings, write_stl

app = Flask(__name__, template_folder=TEMPLATE_DIR)


@app.route('/', methods=['GET'])
def upload():
    return render_template('upload.html', base=BASE, scale=SCALE, levels=LEVELS)


@app.route('/convert', methods=['POST'])
def convert():
    if 'file' not in request.files or request.files['file'].filename == '':
        print("No file selected for upload!")
        return jsonify({"error": "No image file uploaded."}), 400

    file = request.files['file']
    ascii_stl = 'ascii' in request.form

    try:
        base = float(request.form.get('base', BASE))
        scale = float(request.form.get('scale', SCALE))
        levels = int(request.form.get('levels', LEVELS))
        check_settings(base, scale, levels)
    except InvalidSettings as e:
        return jsonify({"error": str(e)}), 400
    except ValueError:
        return jsonify({"error": "base, scale and levels must be numbers."}), 400

    try:
        pixels = decode_pixels(file.read())
        heightmap = build_heightmap(pixels, levels=levels)
    except ImageUnreadable:
        print(f"Could not decode upload: {file.filename}")
        return jsonify({"error": "Couldn't read that image."}), 400
    except UnsupportedPixelShape as e:
        return jsonify({"error": str(e)}), 400

    width, height = heightmap.shape
    print(f"Heightmap built from {file.filename}: {width}x{height}")

    buf = io.BytesIO()
    count = write_stl(heightmap, buf, ascii=ascii_stl, base=base, scale=scale)
    buf.seek(0)
    print(f"✅ STL generated: {count} triangles ({'ASCII' if ascii_stl else 'binary'})")

    return send_file(buf, mimetype='model/stl', as_attachment=True,
                     download_name=DEFAULT_OUTPUT)


if __name__ == '__main__':
    app.run(debug=True)
