# sudokulens

Turn a photograph of a sudoku into a solved grid.

Images are handled as 2-D `uint32` numpy arrays of ARGB pixels, indexed
`[y, x]` (`sudokulens.pixels.load_image` and `save_image` convert to and
from image files through Pillow).

In IMAGE mode a photo goes through a fixed chain of steps: Gaussian blur,
adaptive ("mean − C") thresholding, removal of white blobs of 50 pixels or
fewer, morphological closing and opening, detection of the grid as the
biggest blob, location of its four corners, a homographic transform to a
252 × 252 image, and cutting into 81 cells. Cells whose biggest blob has more
than 40 pixels are kept as digits and classified by a small feed-forward
neural network (784 inputs, 30 sigmoid hidden units, 9 softmax outputs); the
recognised grid is handed to the backtracking solver and drawn as an image.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `sudokulens` command works in one of several modes, chosen with
`--mode` (or `-m`; the name is case-insensitive):

| Mode      | What it does                                                          |
|-----------|-----------------------------------------------------------------------|
| `IMAGE`   | Process a photo end to end and save the result                        |
| `TRAIN`   | Train the digit recogniser and save its weights                       |
| `PREDICT` | Print the network's outputs for one digit image                       |
| `SOLVE`   | Solve a grid stored in a text file and show the rendered result       |
| `GUI`     | The default: enter `./UserInterface` and run `./interface` there      |

Examples:

```
sudokulens --mode image -i photo.png -o solved.png -v -v
sudokulens --mode train -n 1000 --nb-images 8228 -l 0.25 -o result_training.txt
sudokulens --mode predict -i cell.bmp -a result_training.txt
sudokulens --mode solve -i grid.txt
```

Options:

- `-i file` — input file (required in IMAGE and PREDICT modes; `grid.txt` by
  default in SOLVE mode)
- `-o file` — output file (`out.bmp` in IMAGE mode, `result_training.txt` in
  TRAIN mode)
- `--show` — open each processing step in the system image viewer and wait
  for Enter before going on
- `-n nb` — number of training iterations (default 100000)
- `-b n` / `--batch-size n` — minibatch size (default 100); accepted and
  stored, but training updates the weights after every image
- `-c n` / `--nb-images n` — number of training images (default 8228)
- `-l n` / `--learning-rate n` / `--step-size n` — step size (default 0.25)
- `-a file` — weights file used in PREDICT mode (default `result_training.txt`)
- `-v` — raise the verbosity; may be given up to three times (more is an error)
- `-h` / `--help` — print help and exit

Invalid arguments print the help to standard error and exit with status 1.
Errors met while running a mode are printed and the command exits with
status 1.

### Files used

- IMAGE mode writes `output.bmp` and `Homographic.bmp` in the working
  directory, saves the cells holding digits as `./extractedDigits/x<col>-y<row>.bmp`
  (the directory is emptied first), and reads the network weights from
  `./weights/result_training.txt`. The processed image is saved under the
  `-o` name; when that name ends in `.bmp` or `.png` it is then overwritten
  with the rendered result.
- IMAGE and SOLVE modes draw the result on the background image
  `/tmp/resultGrid.jpg`, using digit pictures `/tmp/Numbers/5-<digit>.png`.
  Digits the solver filled in are recoloured.
- TRAIN mode reads its images from `./bddImages/` (hidden files skipped);
  each file name carries its label, 1 to 9, after the first `-`, such as
  `img12-7.png`. The weights file holds the three layer sizes and then every
  weight and bias, one number per line.

## Solving a text grid

The `sudokulens-solve` command reads a grid of 81 characters from a text
file (spaces and newlines are ignored; empty cells are `.` or `0`), solves
it and writes the solution next to the input as `<file>.result`, with a
space between boxes and a blank line between bands of three rows:

```
sudokulens-solve grid.txt
```

It exits with status 1 when the file cannot be read, holds characters other
than digits and dots, or has no solution.

## Library

Each stage is available on its own:

- `sudokulens.pixels` — the image representation, `load_image`, `save_image`,
  `draw_line`
- `sudokulens.grayscale` — conversion to gray
- `sudokulens.noise` — Gaussian blur and Kuwahara filter
- `sudokulens.threshold` — adaptive thresholding
- `sudokulens.morphology` — dilation, erosion, closing and opening
- `sudokulens.floodfill` — four-connected flood fill
- `sudokulens.blobs` — biggest blob detection and small blob removal
- `sudokulens.corners` — the four corners of the grid (`order_points`)
- `sudokulens.homography` — perspective correction
- `sudokulens.canny`, `sudokulens.hough`, `sudokulens.rotation` — edge
  detection, line detection and rotation
- `sudokulens.cutter` — splitting the grid into cells
- `sudokulens.matrix` — small matrix helpers (determinant, adjoint, inverse)
- `sudokulens.network`, `sudokulens.training`, `sudokulens.dataset` — the
  digit recogniser
- `sudokulens.solver` — the backtracking solver
- `sudokulens.result` — drawing the solved grid
- `sudokulens.pipeline` — the whole chain, as `process_image(options)`
- `sudokulens.utils`, `sudokulens.verbose` — options, modes and leveled
  console messages

## What it does not do

- There is no graphical interface in the package: GUI mode only starts an
  `./interface` program found in `./UserInterface`, and fails if there is none.
- No trained weights, training images, background picture or digit pictures
  come with the package; the modes that need them expect them at the paths
  listed above.