import time

import numpy as np
from loguru import logger

from rlwe.config import Preset
from rlwe.engine import RLWE
from rlwe.utils import log2_headroom

from .interface import (
    BenchmarkBase,
    BenchmarkResult,
    BenchmarkResultMetricType,
)
from .registry import benchreg


def _timed(fn, repeats: int):
    latencies = []
    out = None
    for _ in range(repeats):
        time0 = time.perf_counter()
        out = fn()
        time1 = time.perf_counter()
        latencies.append((time1 - time0) * 1000)  # Convert to milliseconds
    return out, np.asarray(latencies)


@benchreg.register(name="Homomorphic Ops")
class HomomorphicOpsBenchmark(BenchmarkBase):
    def __init__(self):
        self.name = "Homomorphic Ops"
        self.description = "Latency of key generation, encryption, decryption, addition and multiplication, plus the noise left after one addition and one multiplication."
        self.config_matrix = {
            preset.value: {
                "description": f"Using the {preset.value} preset, run every operation {repeats} times",
                "preset": preset,
                "repeats": repeats,
            }
            for preset, repeats in (
                (Preset.toy, 20),
                (Preset.small, 5),
                (Preset.medium, 2),
            )
        }

    def get_option_name2desc(self):
        return {k: v["description"] for k, v in self.config_matrix.items()}

    def run(self, option_name, seed: int | None = None):
        assert (
            option_name in self.config_matrix
        ), f"Invalid benchmark name: {option_name}"
        config = self.config_matrix[option_name]
        repeats = config["repeats"]
        logger.info(f"Using config: {config['description']}")

        benchmark_result = BenchmarkResult()
        engine = RLWE.from_preset(config["preset"], seed=seed)
        m0 = engine.encode(engine.rng.randint(0, engine.t - 1, engine.n))
        m1 = engine.encode(engine.rng.randint(0, engine.t - 1, engine.n))

        (sk, pk), keygen_ms = _timed(engine.generate_keys, repeats)
        ct0, encrypt_ms = _timed(lambda: engine.encrypt(m0, pk), repeats)
        ct1 = engine.encrypt(m1, pk)
        ct_add, add_ms = _timed(lambda: engine.add(ct0, ct1), repeats)
        ct_mul, mul_ms = _timed(lambda: engine.mul(ct0, ct1), repeats)
        _, decrypt_ms = _timed(lambda: engine.decrypt(ct_mul, sk), repeats)

        rows = [["Operation", "Mean (ms)", "Max (ms)"]]
        for op, latencies in (
            ("generate_keys", keygen_ms),
            ("encrypt", encrypt_ms),
            ("add", add_ms),
            ("mul", mul_ms),
            ("decrypt (degree 2)", decrypt_ms),
        ):
            rows.append([op, f"{latencies.mean():.3f}", f"{latencies.max():.3f}"])
        benchmark_result.add_metric(
            name="Latency",
            metric_type=BenchmarkResultMetricType.TABLE,
            value=rows,
            series="latency",
            description=f"Averaged over {repeats} runs.",
        )

        correct = (
            engine.decrypt(ct_add, sk) == m0 + m1
            and engine.decrypt(ct_mul, sk) == m0 * m1
        )
        benchmark_result.add_metric(
            name="Correct",
            metric_type=BenchmarkResultMetricType.SCALAR,
            value=correct,
            series="noise",
            description="Sum and product decrypt to the plaintext results.",
        )
        for name, ct in (("fresh", ct0), ("add", ct_add), ("mul", ct_mul)):
            benchmark_result.add_metric(
                name=f"Headroom after {name} (bits)",
                metric_type=BenchmarkResultMetricType.SCALAR,
                value=round(log2_headroom(engine.noise(ct, sk), engine.q), 2),
                series="noise",
                description="log2(q/2) - log2(noise), decryption fails below 0.",
            )

        if not correct:
            logger.warning(f"Decryption failed with {option_name} parameters")
        return benchmark_result


if __name__ == "__main__":
    benchmark = HomomorphicOpsBenchmark()
    benchmark.run("toy")
