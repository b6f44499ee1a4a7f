from types import SimpleNamespace

import pytest

from sparsela.logger import Logger
from sparsela.registry import (
    CPU_SUFFIX,
    GPU_CL_SUFFIX,
    DispatchContext,
    Dispatcher,
    Registry,
    RegistryAlgo,
    make_key,
)
from sparsela.status import SplaError, Status


class _Algo(RegistryAlgo):
    def __init__(self, tag, fail=None):
        self.tag = tag
        self.fail = fail
        self.calls = []

    def name(self):
        return self.tag

    def description(self):
        return f"algo {self.tag}"

    def execute(self, ctx):
        self.calls.append(ctx)
        if self.fail is not None:
            raise self.fail
        return self.tag


def _ctx(key):
    return DispatchContext(task=SimpleNamespace(key=key))


def test_registry_add_has_find():
    reg = Registry()
    algo = _Algo("a")
    assert not reg.has("k")
    assert reg.find("k") is None
    reg.add("k", algo)
    assert reg.has("k")
    assert reg.find("k") is algo


def test_registry_add_replaces():
    reg = Registry()
    first, second = _Algo("a"), _Algo("b")
    reg.add("k", first)
    reg.add("k", second)
    assert reg.find("k") is second


def test_make_key_with_strings_and_objects():
    op = SimpleNamespace(key="PLUS_INT")
    assert make_key("v_reduce", op) == "v_reduce_PLUS_INT"
    assert make_key("mxv", "A", "B", op) == "mxv_A_B_PLUS_INT"
    assert make_key("name") == "name"


def test_dispatch_uses_cpu_without_accelerator():
    reg = Registry()
    cpu = _Algo("cpu")
    reg.add("op" + CPU_SUFFIX, cpu)
    dispatcher = Dispatcher(reg, Logger())
    ctx = _ctx("op")
    assert dispatcher.dispatch(ctx) == "cpu"
    assert cpu.calls == [ctx]


def test_dispatch_prefers_accelerator():
    reg = Registry()
    reg.add("op" + CPU_SUFFIX, _Algo("cpu"))
    reg.add("op" + GPU_CL_SUFFIX, _Algo("cl"))
    dispatcher = Dispatcher(reg, Logger(), GPU_CL_SUFFIX, False)
    assert dispatcher.dispatch(_ctx("op")) == "cl"


def test_dispatch_force_no_acceleration_uses_cpu():
    reg = Registry()
    reg.add("op" + CPU_SUFFIX, _Algo("cpu"))
    reg.add("op" + GPU_CL_SUFFIX, _Algo("cl"))
    dispatcher = Dispatcher(reg, Logger(), GPU_CL_SUFFIX, True)
    assert dispatcher.dispatch(_ctx("op")) == "cpu"


def test_dispatch_falls_back_to_cpu_when_no_accelerated_algo():
    reg = Registry()
    reg.add("op" + CPU_SUFFIX, _Algo("cpu"))
    dispatcher = Dispatcher(reg, Logger(), GPU_CL_SUFFIX, False)
    assert dispatcher.dispatch(_ctx("op")) == "cpu"


def test_dispatch_missing_algo_raises_not_implemented_and_logs():
    messages = []
    logger = Logger(lambda *args: messages.append(args))
    dispatcher = Dispatcher(Registry(), logger)
    with pytest.raises(SplaError) as info:
        dispatcher.dispatch(_ctx("unknown"))
    assert info.value.status is Status.NOT_IMPLEMENTED
    assert len(messages) == 1
    assert messages[0][0] is Status.NOT_IMPLEMENTED
    assert "unknown" in messages[0][1]


def test_dispatch_unexpected_exception_becomes_error():
    messages = []
    reg = Registry()
    reg.add("op" + CPU_SUFFIX, _Algo("cpu", fail=RuntimeError("kaboom")))
    dispatcher = Dispatcher(reg, Logger(lambda *args: messages.append(args)))
    with pytest.raises(SplaError) as info:
        dispatcher.dispatch(_ctx("op"))
    assert info.value.status is Status.ERROR
    assert isinstance(info.value.__cause__, RuntimeError)
    assert "kaboom" in messages[0][1]


def test_dispatch_passes_through_library_errors():
    reg = Registry()
    reg.add("op" + CPU_SUFFIX, _Algo("cpu", fail=SplaError(Status.INVALID_ARGUMENT)))
    dispatcher = Dispatcher(reg, Logger())
    with pytest.raises(SplaError) as info:
        dispatcher.dispatch(_ctx("op"))
    assert info.value.status is Status.INVALID_ARGUMENT


def test_dispatch_context_defaults():
    ctx = _ctx("k")
    assert ctx.key == "k"
    assert (ctx.thread_id, ctx.step_id, ctx.task_id) == (0, 0, 0)


def test_registry_algo_is_abstract():
    with pytest.raises(TypeError):
        RegistryAlgo()