import keyscore


def test_version():
    assert keyscore.get_version() == keyscore.__version__ == "1.0.0"


def test_public_api():
    result = keyscore.analyze_password("")
    assert isinstance(result, keyscore.AnalysisResult)
    assert keyscore.load_common_passwords("") == frozenset()
