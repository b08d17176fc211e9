import numpy as np
import pytest

from sudokulens.network import NeuralNetwork
from sudokulens.pixels import new_image, save_image
from sudokulens.training import (
    Gradients,
    back_propagation,
    gradient_descent,
    shuffle_dataset,
    sigmoid_prime,
    train,
)
from sudokulens.utils import Options


def _loss(network, inputs, label_index):
    return -np.log(network.feed_forward(inputs)[label_index])


@pytest.fixture
def small():
    network = NeuralNetwork(3, 2, 4, np.random.default_rng(0))
    inputs = np.array([0.3, -0.2, 0.5])
    target = np.zeros(4)
    target[1] = 1
    return network, inputs, target


def test_sigmoid_prime_properties():
    assert np.allclose(sigmoid_prime([0.0, 1.0]), [0.0, 0.0])
    a = np.linspace(0, 1, 11)
    assert np.allclose(sigmoid_prime(a), sigmoid_prime(1 - a))
    assert sigmoid_prime([0.5])[0] >= sigmoid_prime(a).max()


def test_back_propagation_matches_finite_differences(small):
    network, inputs, target = small
    network.feed_forward(inputs)
    grads = back_propagation(network, inputs, target)
    eps = 1e-6
    for array, grad in ((network.bh, grads.bh), (network.by, grads.by), (network.wy, grads.wy)):
        flat = array.reshape(-1)
        for k in range(flat.size):
            flat[k] += eps
            up = _loss(network, inputs, 1)
            flat[k] -= 2 * eps
            down = _loss(network, inputs, 1)
            flat[k] += eps
            assert (up - down) / (2 * eps) == pytest.approx(grad.reshape(-1)[k], abs=1e-5)


def test_back_propagation_shapes_and_output_error(small):
    network, inputs, target = small
    network.feed_forward(inputs)
    grads = back_propagation(network, inputs, target)
    assert grads.wh.shape == network.wh.shape
    assert grads.wy.shape == network.wy.shape
    assert grads.by.sum() == pytest.approx(0.0, abs=1e-12)


def test_gradient_descent_lowers_loss(small):
    network, inputs, target = small
    before = _loss(network, inputs, 1)
    grads = back_propagation(network, inputs, target)
    gradient_descent(network, grads, 0.01, 1)
    assert _loss(network, inputs, 1) < before


def test_gradient_descent_zero_gradients_changes_nothing(small):
    network, _, _ = small
    wh, wy = network.wh.copy(), network.wy.copy()
    zeros = Gradients(
        np.zeros_like(network.wh), np.zeros(2), np.zeros_like(network.wy), np.zeros(4)
    )
    gradient_descent(network, zeros, 0.25, 1)
    assert np.array_equal(network.wh, wh)
    assert np.array_equal(network.wy, wy)


def test_gradient_descent_rejects_no_samples(small):
    network, inputs, target = small
    network.feed_forward(inputs)
    grads = back_propagation(network, inputs, target)
    with pytest.raises(ValueError):
        gradient_descent(network, grads, 0.25, 0)


def test_shuffle_keeps_items_and_is_seeded():
    first = list(range(20))
    second = list(range(20))
    shuffle_dataset(first, np.random.default_rng(5))
    shuffle_dataset(second, np.random.default_rng(5))
    assert sorted(first) == list(range(20))
    assert first == second


def test_shuffle_empty_list():
    items = []
    shuffle_dataset(items, np.random.default_rng(1))
    assert items == []


def _dataset(root, names):
    folder = root / "bddImages"
    folder.mkdir()
    for name in names:
        save_image(new_image(28, 28), folder / name)


def test_train_writes_loadable_network(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _dataset(tmp_path, ["p-1.png", "q-2.png"])
    out = tmp_path / "net.txt"
    options = Options(output_file=str(out), nb_iterations=1, nb_images=2)
    network = train(options)
    loaded = NeuralNetwork.load(str(out))
    assert loaded.sizes == (784, 30, 9)
    assert np.allclose(loaded.by, network.by, atol=1e-6)
    printed = capsys.readouterr().out.split()
    assert len(printed) == 9


def test_train_rejects_bad_label(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _dataset(tmp_path, ["p-0.png"])
    options = Options(output_file=str(tmp_path / "net.txt"), nb_iterations=1, nb_images=1)
    with pytest.raises(ValueError):
        train(options)