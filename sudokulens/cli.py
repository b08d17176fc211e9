"""Command line: process an image, train or query the network, or solve a grid file."""

import argparse
import os
import re
import sys

import numpy as np
from PIL import Image

from .network import predict
from .pipeline import process_image
from .result import render_grid_file
from .training import train
from .utils import Mode, Options
from .verbose import MAX_VERBOSE_LEVEL, RED, RESET, FatalError, info, set_level

PROGNAME = "sudokulens"
INTERFACE_DIR = "./UserInterface"
INTERFACE_ARGS = ["./interface"]

HELP = """{prog} 3.14.15 help:
[ IMAGE mode specific options ]
   -i file: Specifiy the input file (required)
   -o file: Specify the output file (default: out.bmp)
   --show: Show the image being processed, one step at a time
[ TRAIN mode specific options ]
   -n nb: Specifiy the number of iterations to train the neural net with (default is 100 000)
   -o file: Specify the output file to save the neural network
   --batch-size n / -b n: Specify the numbers of elements in a minibatch size (default 100)
   --nb-images n: Specify the number of image to train with. (default 8228)
   --learning-rate n / --step-size n / -l n: Specify the step size (default 0.25)
[ PREDICT mode specific options ]
   -i file: Specify the image file to predict the digit
   -a file: Specify the file containing the weights and biais of the neural network
[ SOLVE mode specific options ]
   -i file: Specify the input file containing the grid to solve (default: grid.txt)
[ General options ]
   -v: Increase the verbose level (default 0), can be used up to 3 times
   --mode mode: Specify the mode to use. Can be one of IMAGE/TRAIN/GUI/PREDICT/SOLVE (default is GUI)
   -h / --help: Show this help and quit"""

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _usage(exit_code):
    text = HELP.format(prog=PROGNAME)
    if exit_code == 0:
        print(text)
    else:
        print(f"{PROGNAME}: {text}", file=sys.stderr)
    raise SystemExit(exit_code)


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        _usage(1)


def _atoi(text):
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _atof(text):
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def parse_args(argv):
    """Parse the arguments into Options and set the verbosity level.

    Invalid arguments print the help and exit with status 1; -h exits with 0.
    """
    parser = _Parser(prog=PROGNAME, add_help=False)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-v", action="count", default=0)
    parser.add_argument("-i")
    parser.add_argument("-o")
    parser.add_argument("-n")
    parser.add_argument("-m", "--mode")
    parser.add_argument("-b", "--batch-size")
    parser.add_argument("-c", "--nb-images")
    parser.add_argument("-l", "--learning-rate", "--step-size", dest="learning_rate")
    parser.add_argument("-a")
    parser.add_argument("--show", action="store_true")
    args = parser.parse_args(list(argv))

    if args.v > MAX_VERBOSE_LEVEL:
        _usage(1)
    if args.help:
        _usage(0)
    set_level(args.v)

    options = Options(input_file=args.i, output_file=args.o, nn_input_file=args.a)
    if args.mode is not None:
        try:
            options.mode = Mode.parse(args.mode)
        except ValueError:
            _usage(1)
    options.show_image = args.show
    if args.n is not None:
        options.nb_iterations = _atoi(args.n)
    if args.batch_size is not None:
        options.minibatch_size = _atoi(args.batch_size)
    if args.nb_images is not None:
        options.nb_images = _atoi(args.nb_images)
    if args.learning_rate is not None:
        options.learning_rate = _atof(args.learning_rate)
    return options


def _display(image):
    image = np.asarray(image, dtype=np.uint32)
    rgb = np.stack(
        [(image >> 16) & 0xFF, (image >> 8) & 0xFF, image & 0xFF], axis=-1
    ).astype(np.uint8)
    Image.fromarray(rgb).show()
    try:
        input("Press Enter to continue...")
    except EOFError:
        pass


def _run(options):
    if options.mode is Mode.IMAGE:
        if options.input_file is None:
            raise FatalError("Invalid arguments. Image mode is specified without the -i flag")
        if options.output_file is None:
            options.output_file = "out.bmp"
        return process_image(options)
    if options.mode is Mode.TRAIN:
        if options.output_file is None:
            options.output_file = "result_training.txt"
        train(options)
        return 0
    if options.mode is Mode.PREDICT:
        if options.input_file is None:
            raise FatalError("Predict mode: flag -i is required")
        if options.nn_input_file is None:
            options.nn_input_file = "result_training.txt"
        result = predict(options.input_file, options.nn_input_file)
        print("".join(f"{value:f} " for value in result[:9]))
        return 0
    if options.mode is Mode.GUI:
        try:
            os.chdir(INTERFACE_DIR)
        except OSError as exc:
            raise FatalError(
                f"Invalid directory. {INTERFACE_DIR} does not exists or cannot enter"
            ) from exc
        try:
            os.execvp(INTERFACE_ARGS[0], INTERFACE_ARGS)
        except OSError as exc:
            raise FatalError(f"Cannot start {INTERFACE_ARGS[0]}: {exc}") from exc
        return 0
    if options.input_file is None:
        options.input_file = "grid.txt"
    _display(render_grid_file(options.input_file))
    return 0


def main(argv=None):
    """Entry point; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    options = parse_args(args)
    info(f"mode = {options.mode.value}")
    if options.input_file is not None:
        info(f"inputFile = {options.input_file}")
    if options.output_file is not None:
        info(f"outputFile = {options.output_file}")
    try:
        return _run(options)
    except FatalError as exc:
        print(f"{RED}[-] {RESET}{exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())