# Property checks tying geometry, container and operations together.

import math
import pytest
import torch
from projective import (
    ProjectiveVector,
    affine_chart,
    dimension_indices,
    embed,
    fubini_study,
    hom_dimension_indices,
    norm,
    norm_affine_chart,
    normalize,
    normalize_,
    scale_,
)

DIMS_CASES = [(1,), (3,), (2, 2), (0, 1, 4), (3, 1, 2, 0, 5)]


def _random(dims, dtype=torch.float64, seed=0):
    torch.manual_seed(seed)
    return ProjectiveVector(torch.randn(sum(dims) + len(dims), dtype=dtype), dims)


@pytest.mark.parametrize("dims", DIMS_CASES)
@pytest.mark.parametrize("dtype", [torch.float64, torch.complex128])
class TestInvariants:
    def test_shape_invariant(self, dims, dtype):
        z = _random(dims, dtype)
        for w in (z.copy(), z.to(torch.complex128), normalize(z), scale_(z.copy(), 2.0)):
            assert len(w) == sum(w.dims) + len(w.dims)
            assert w.dims == z.dims

    def test_round_trip(self, dims, dtype):
        torch.manual_seed(1)
        x = torch.randn(sum(dims), dtype=dtype)
        assert torch.allclose(affine_chart(embed(x, dims)), x)

    def test_block_norm_additivity(self, dims, dtype):
        z = _random(dims, dtype)
        total = sum(n.item() ** 2 for n in norm(z))
        assert total == pytest.approx(torch.linalg.vector_norm(z.data).item() ** 2)

    def test_normalization_idempotent(self, dims, dtype):
        z = _random(dims, dtype)
        for p in (2, math.inf):
            once = normalize(z, p)
            assert torch.allclose(normalize(once, p).data, once.data)
            for n in norm(once, p):
                assert n.item() == pytest.approx(1.0)

    def test_norm_affine_chart(self, dims, dtype):
        z = _random(dims, dtype)
        for p in (2, math.inf):
            naive = torch.linalg.vector_norm(affine_chart(z), ord=p).item()
            assert norm_affine_chart(z, p).item() == pytest.approx(naive)

    def test_fubini_study_range(self, dims, dtype):
        v = _random(dims, dtype, seed=2)
        w = _random(dims, dtype, seed=3)
        for d in fubini_study(v, w):
            assert 0.0 <= d.item() <= math.pi / 2 + 1e-12

    def test_geometry_partitions_buffer(self, dims, dtype):
        z = _random(dims, dtype)
        covered = []
        for r in dimension_indices(z):
            covered.extend(range(r.start, r.stop))
        assert covered == list(range(len(z)))
        homs = [h for _, h in hom_dimension_indices(z)]
        assert homs == [r.stop - 1 for r in dimension_indices(z)]


def test_copy_does_not_alias():
    z = _random((2, 3))
    c = z.copy()
    normalize_(c)
    assert c != z
    assert z == _random((2, 3))
