"""A one-hidden-layer neural network with sigmoid hidden units and softmax output."""

import numpy as np

from .dataset import load_labeled_image
from .verbose import FatalError

PATH_WEIGHT = "./weights/result_training.txt"


def sigmoid(values):
    """Element-wise logistic function."""
    return 1.0 / (1.0 + np.exp(-np.asarray(values, dtype=float)))


def softmax(values):
    """Normalised exponentials of `values`."""
    values = np.asarray(values, dtype=float)
    exps = np.exp(values - values.max())
    return exps / exps.sum()


class NeuralNetwork:
    """Weights, biases and the activations of the last forward pass."""

    def __init__(self, inputs, hidden, outputs, rng=None):
        self.inputs = inputs
        self.hidden = hidden
        self.outputs = outputs
        self.wh = np.zeros((inputs, hidden))
        self.bh = np.zeros(hidden)
        self.wy = np.zeros((hidden, outputs))
        self.by = np.zeros(outputs)
        self.hidden_sum = np.zeros(hidden)
        self.hidden_activation = np.zeros(hidden)
        self.output_sum = np.zeros(outputs)
        self.output_activation = np.zeros(outputs)
        self.randomize(rng)

    @property
    def sizes(self):
        """(inputs, hidden, outputs)."""
        return self.inputs, self.hidden, self.outputs

    def randomize(self, rng=None):
        """Draw every weight uniformly from [-1, 1]; biases are left as they are."""
        rng = np.random.default_rng() if rng is None else rng
        self.wh = 1 - 2 * rng.random(self.wh.shape)
        self.wy = 1 - 2 * rng.random(self.wy.shape)

    def feed_forward(self, inputs):
        """Run one forward pass and return the output probabilities."""
        x = np.asarray(inputs, dtype=float).ravel()
        if x.size != self.inputs:
            raise ValueError(f"expected {self.inputs} inputs, got {x.size}")
        self.hidden_sum = x @ self.wh + self.bh
        self.hidden_activation = sigmoid(self.hidden_sum)
        self.output_sum = self.hidden_activation @ self.wy + self.by
        self.output_activation = softmax(self.output_sum)
        return self.output_activation.copy()

    def save(self, path):
        """Write the layer sizes then every weight and bias, one per line."""
        try:
            handle = open(path, "w", encoding="utf-8")
        except OSError as exc:
            raise FatalError(f"Cannot open {path}. No such file or directory.") from exc
        with handle:
            handle.write(f"{self.inputs}\n{self.hidden}\n{self.outputs}\n")
            for matrix in (self.wh, self.bh, self.wy, self.by):
                handle.writelines(f"{value:f}\n" for value in matrix.ravel())

    @classmethod
    def load(cls, path):
        """Read a network written by `save`."""
        try:
            with open(path, encoding="utf-8") as handle:
                tokens = handle.read().split()
        except OSError as exc:
            raise FatalError(f"Cannot open {path}. No such file or directory.") from exc
        try:
            if len(tokens) < 3:
                raise ValueError("missing layer sizes")
            sizes = [int(token) for token in tokens[:3]]
            if any(size <= 0 for size in sizes):
                raise ValueError("layer sizes must be positive")
        except ValueError as exc:
            raise FatalError(f"Invalid file: {path}") from exc

        network = cls(*sizes)
        inputs, hidden, outputs = sizes
        shapes = ((inputs, hidden), (hidden,), (hidden, outputs), (outputs,))
        needed = sum(int(np.prod(shape)) for shape in shapes)
        try:
            if len(tokens) - 3 < needed:
                raise ValueError("not enough values")
            values = np.array([float(t) for t in tokens[3:3 + needed]])
        except ValueError as exc:
            raise FatalError("Badly formated file.") from exc

        arrays = []
        offset = 0
        for shape in shapes:
            count = int(np.prod(shape))
            arrays.append(values[offset:offset + count].reshape(shape))
            offset += count
        network.wh, network.bh, network.wy, network.by = arrays
        return network


def predict(image_path, weights_path=PATH_WEIGHT):
    """Return the network's output probabilities for the digit image."""
    image = load_labeled_image(image_path)
    network = NeuralNetwork.load(weights_path)
    return network.feed_forward(image.pixels)