import numpy as np
import pytest

from sudokulens.network import NeuralNetwork, predict, sigmoid, softmax
from sudokulens.pixels import intensity_to_argb, save_image
from sudokulens.dataset import load_labeled_image
from sudokulens.verbose import FatalError


def test_sigmoid_at_zero():
    assert sigmoid([0.0])[0] == pytest.approx(0.5)


def test_sigmoid_is_symmetric():
    values = sigmoid([-2.0, 2.0])
    assert values[0] + values[1] == pytest.approx(1.0)


def test_softmax_sums_to_one_and_keeps_order():
    result = softmax([1.0, 3.0, 2.0])
    assert result.sum() == pytest.approx(1.0)
    assert list(np.argsort(result)) == [0, 2, 1]


def test_softmax_equal_inputs_share_equally():
    assert softmax([1000.0, 1000.0]).tolist() == pytest.approx([0.5, 0.5])


def test_randomize_range_and_zero_biases():
    net = NeuralNetwork(5, 4, 3, rng=np.random.default_rng(1))
    assert net.wh.shape == (5, 4)
    assert net.wy.shape == (4, 3)
    assert np.all(np.abs(net.wh) <= 1)
    assert np.all(np.abs(net.wy) <= 1)
    assert not net.bh.any() and not net.by.any()


def test_randomize_is_reproducible():
    a = NeuralNetwork(3, 2, 2, rng=np.random.default_rng(7))
    b = NeuralNetwork(3, 2, 2, rng=np.random.default_rng(7))
    assert np.array_equal(a.wh, b.wh)
    assert np.array_equal(a.wy, b.wy)


def test_feed_forward_outputs_distribution():
    net = NeuralNetwork(4, 3, 9, rng=np.random.default_rng(0))
    out = net.feed_forward([0.1, 0.2, 0.3, 0.4])
    assert out.shape == (9,)
    assert out.sum() == pytest.approx(1.0)
    assert np.all((net.hidden_activation > 0) & (net.hidden_activation < 1))


def test_feed_forward_rejects_wrong_size():
    net = NeuralNetwork(4, 3, 2)
    with pytest.raises(ValueError):
        net.feed_forward([1.0, 2.0])


def test_save_format_and_round_trip(tmp_path):
    net = NeuralNetwork(2, 3, 4, rng=np.random.default_rng(3))
    net.wh[0, 0] = 0.5
    path = tmp_path / "weights.txt"
    net.save(path)
    lines = path.read_text().splitlines()
    assert lines[:4] == ["2", "3", "4", "0.500000"]
    loaded = NeuralNetwork.load(path)
    assert loaded.sizes == (2, 3, 4)
    for name in ("wh", "bh", "wy", "by"):
        assert np.allclose(getattr(loaded, name), getattr(net, name), atol=1e-6)


def test_load_missing_file(tmp_path):
    with pytest.raises(FatalError):
        NeuralNetwork.load(tmp_path / "none.txt")


def test_load_invalid_header(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("two\n3\n4\n")
    with pytest.raises(FatalError):
        NeuralNetwork.load(path)


def test_load_truncated_values(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("2\n2\n2\n0.1\n0.2\n")
    with pytest.raises(FatalError):
        NeuralNetwork.load(path)


def test_predict_matches_loaded_network(tmp_path):
    image_path = tmp_path / "digit-4.png"
    image = np.array(
        [[intensity_to_argb(10), intensity_to_argb(200)],
         [intensity_to_argb(50), intensity_to_argb(0)]],
        dtype=np.uint32,
    )
    save_image(image, image_path)
    weights = tmp_path / "weights.txt"
    NeuralNetwork(4, 3, 9, rng=np.random.default_rng(5)).save(weights)

    result = predict(image_path, weights)
    expected = NeuralNetwork.load(weights).feed_forward(
        load_labeled_image(image_path).pixels
    )
    assert result.shape == (9,)
    assert np.allclose(result, expected)
    assert result.sum() == pytest.approx(1.0)