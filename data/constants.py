PROJECT_NAME = "Cardano Asset Fingerprint"
