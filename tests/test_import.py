"""Basic import tests to verify package structure."""


def test_import_lwsim():
    """Verify main package imports."""
    import lwsim
    assert lwsim.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from lwsim import core
    assert hasattr(core, "LatencySimulator")


def test_import_analysis():
    """Verify analysis module structure exists."""
    from lwsim import analysis
    assert hasattr(analysis, "SimulationResult")


def test_import_report():
    """Verify report entry point exists."""
    from lwsim import report
    assert callable(report.main)
