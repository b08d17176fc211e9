"""Training the digit network with stochastic gradient descent."""

from dataclasses import dataclass

import numpy as np

from .dataset import DATASET_DIR, load_dataset
from .matrix import format_matrix
from .network import NeuralNetwork
from .verbose import get_level, info, log

INPUT_SIZE = 28 * 28
HIDDEN_SIZE = 30
OUTPUT_SIZE = 9
DEFAULT_OUTPUT = "result_training.txt"


@dataclass
class Gradients:
    """Gradients of the loss for every weight and bias of a network."""

    wh: np.ndarray
    bh: np.ndarray
    wy: np.ndarray
    by: np.ndarray


def sigmoid_prime(activations):
    """Derivative of the sigmoid, expressed through its outputs: a * (1 - a)."""
    a = np.asarray(activations, dtype=float)
    return (1 - a) * a


def back_propagation(network, inputs, target):
    """Return the gradients of the last forward pass of `network` on `inputs`.

    `network.feed_forward(inputs)` must have been called just before.
    """
    x = np.asarray(inputs, dtype=float).ravel()
    t = np.asarray(target, dtype=float).ravel()
    error = network.output_activation - t
    hidden_error = (error @ network.wy.T) * sigmoid_prime(network.hidden_activation)
    return Gradients(
        wh=np.outer(x, hidden_error),
        bh=hidden_error,
        wy=np.outer(network.hidden_activation, error),
        by=error,
    )


def gradient_descent(network, gradients, learning_rate, samples=1):
    """Move every weight and bias against its gradient, scaled by rate / samples."""
    if samples <= 0:
        raise ValueError("samples must be positive")
    step = learning_rate / samples
    network.wh -= step * gradients.wh
    network.bh -= step * gradients.bh
    network.wy -= step * gradients.wy
    network.by -= step * gradients.by


def shuffle_dataset(images, rng=None):
    """Shuffle `images` in place with as many random swaps as there are items."""
    rng = np.random.default_rng() if rng is None else rng
    size = len(images)
    for _ in range(size):
        a = int(rng.integers(size))
        b = int(rng.integers(size))
        images[a], images[b] = images[b], images[a]


def _one_hot(label, outputs):
    if not 1 <= label <= outputs:
        raise ValueError(f"label {label} outside 1..{outputs}")
    target = np.zeros(outputs)
    target[label - 1] = 1
    return target


def train(options):
    """Train a network on the images of the dataset directory and save it.

    Returns the trained network.
    """
    output = options.output_file or DEFAULT_OUTPUT
    info("Init Neural Net weights and bias")
    rng = np.random.default_rng()
    network = NeuralNetwork(INPUT_SIZE, HIDDEN_SIZE, OUTPUT_SIZE, rng)
    info("Load the Images")
    images = load_dataset(DATASET_DIR, options.nb_images)

    last = None
    for iteration in range(options.nb_iterations):
        if iteration % 200 == 0:
            log(f"Iteration {iteration}")
        if iteration % 500 == 0 and get_level() >= 3:
            network.save(output)
        shuffle_dataset(images, rng)
        for image in images:
            network.feed_forward(image.pixels)
            last = back_propagation(
                network, image.pixels, _one_hot(image.label, OUTPUT_SIZE)
            )
            gradient_descent(network, last, options.learning_rate, 1)

    for index, image in enumerate(images):
        probabilities = network.feed_forward(image.pixels)
        if options.nb_iterations - 1 == index:
            error = last.by if last is not None else np.zeros(OUTPUT_SIZE)
            print(format_matrix(error), end="")
        else:
            log(f"{probabilities[image.label - 1]:f}")

    network.save(output)
    return network