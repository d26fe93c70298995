# main.py
import argparse
import logging
import random
import sys
import time
from renderer.raytracer import Renderer
from renderer.tone_mapping import gamma_correct
from renderer.image_output import save_image, write_ppm
from scenes import SCENES, build_scene

logger = logging.getLogger(__name__)

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Offline CPU path tracer.")
    parser.add_argument("-s", "--scene", type=int, default=1,
                        help=f"demo scene number ({min(SCENES)}-{max(SCENES)})")
    parser.add_argument("--width", type=int, help="image width in pixels (scene default otherwise)")
    parser.add_argument("--samples", type=int, help="samples per pixel (scene default otherwise)")
    parser.add_argument("--max-depth", type=int, help="maximum bounces per path (scene default otherwise)")
    parser.add_argument("--workers", type=int, help="number of render workers (default: CPU count)")
    parser.add_argument("--threads", action="store_true",
                        help="render in worker threads instead of processes")
    parser.add_argument("--seed", type=int, help="seed for the scene layout and all pixel samples")
    parser.add_argument("--texture", default="earthmap.jpg", help="image used by the earth scene")
    parser.add_argument("-o", "--output", help="output image (.ppm or any Pillow format); default is PPM on stdout")
    parser.add_argument("--preview", action="store_true", help="show the finished image in a window")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress details")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    # stdout carries the image; everything else goes to stderr.
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)

    seed = args.seed if args.seed is not None else random.SystemRandom().randrange(1 << 32)
    try:
        setup = build_scene(args.scene, random.Random(seed), args.texture)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error building scene {args.scene}: {e}", file=sys.stderr)
        return 1

    width = args.width if args.width is not None else setup.image_width
    height = int(width / setup.aspect_ratio)
    try:
        renderer = Renderer(
            setup.scene,
            setup.camera(),
            width,
            height,
            samples_per_pixel=args.samples if args.samples is not None else setup.samples_per_pixel,
            max_depth=args.max_depth if args.max_depth is not None else setup.max_depth,
            workers=args.workers,
            use_processes=not args.threads,
            seed=seed,
        )
    except ValueError as e:
        print(f"Invalid render settings: {e}", file=sys.stderr)
        return 1

    start_time = time.perf_counter()
    pixels = gamma_correct(renderer.render())
    total_time = time.perf_counter() - start_time

    if args.output:
        save_image(args.output, pixels)
        logger.info("Wrote %s", args.output)
    else:
        write_ppm(sys.stdout, pixels)
        sys.stdout.flush()

    print(f"\nDone. Seconds = {total_time:.3f}", file=sys.stderr)

    if args.preview:
        from renderer.preview import show_image
        show_image(pixels, title=f"Scene {args.scene}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
