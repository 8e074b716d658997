class ComplianceError(Exception):
    pass


class ConfigurationMissing(ComplianceError):
    pass


class BillingProviderError(ComplianceError):
    pass


class DataInconsistency(ComplianceError):
    pass
