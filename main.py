"""
Blurhash Studio
Compact image placeholders: encode images to blurhash strings and back
"""

import logging
import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)

USAGE = """\
Usage: python main.py encode <image_path|--synthetic[=key]> [x_components] [y_components]
       python main.py decode <hash> <width> <height> [output.png] [punch]
       python main.py inspect <image_path|--synthetic[=key]> [x_components] [y_components]

Options:
       --verbose    debug logging"""


def _load_source(arg: str):
    from utils.image_io import load_image, downscale_for_hash
    from utils.test_images import generate_demo_image

    if arg.startswith('--synthetic'):
        key = arg.partition('=')[2] or 'gradient'
        print(f"Generating test image ({key})...")
        image = generate_demo_image(key)
        if image is None:
            raise ValueError(f"Unknown synthetic image: {key}")
        return image

    print(f"Loading: {arg}")
    return downscale_for_hash(load_image(arg))


def _hash_params(args):
    from models.hash_params import HashParams

    x_components = int(args[0]) if len(args) > 0 else 4
    y_components = int(args[1]) if len(args) > 1 else 3
    return HashParams(x_components=x_components, y_components=y_components)


def run_encode(args):
    """Print the blurhash of an image."""
    from engines.codec import encode_image

    image = _load_source(args[0])
    params = _hash_params(args[1:])
    print(f"Image: {image.shape[1]}x{image.shape[0]}")
    print(f"Components: {params.x_components}x{params.y_components}")
    print(encode_image(image, params))


def run_decode(args):
    """Render a blurhash to an image file."""
    from engines.codec import decode_image, get_components, average_color
    from utils.image_io import save_image

    if len(args) < 3:
        print(USAGE)
        sys.exit(1)

    blurhash = args[0]
    width, height = int(args[1]), int(args[2])
    output = args[3] if len(args) > 3 else "placeholder.png"
    punch = float(args[4]) if len(args) > 4 else 1.0

    placeholder = decode_image(blurhash, width, height, punch)
    x_components, y_components = get_components(blurhash)
    print(f"Components: {x_components}x{y_components}")
    print(f"Average color: {average_color(blurhash)}")

    save_image(placeholder, output)
    print(f"Saved: {output} ({width}x{height}, punch={punch})")


def run_inspect(args):
    """Hash an image and report how close the placeholder gets."""
    from engines.pipeline import encode_reconstruct
    from utils.image_io import save_image

    image = _load_source(args[0])
    params = _hash_params(args[1:])
    print(f"Image: {image.shape[1]}x{image.shape[0]}")

    result, intermediate = encode_reconstruct(image, params)

    print("\n=== Results ===")
    print(f"Hash:      {result.blurhash}")
    print(f"Length:    {result.hash_bytes} bytes ({result.compression_ratio:.1f}:1)")
    print(f"Avg color: {result.average_color}")
    print(f"Max AC:    {intermediate.quantized_max_ac} ({intermediate.max_ac_value:.4f})")
    print(f"PSNR (Y):  {result.psnr_y:.2f} dB")
    print(f"SSIM (Y):  {result.ssim_y:.4f}")
    print(f"Time:      {result.encode_time_ms + result.decode_time_ms:.2f} ms")

    save_image(result.placeholder_image, "placeholder.png")
    print("\nSaved: placeholder.png")


COMMANDS = {
    'encode': run_encode,
    'decode': run_decode,
    'inspect': run_inspect,
}


def main():
    args = sys.argv[1:]
    if '--verbose' in args:
        args.remove('--verbose')
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    if len(args) < 2 or args[0] not in COMMANDS or args[1] == '--help':
        print(USAGE)
        sys.exit(0)

    try:
        COMMANDS[args[0]](args[1:])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
