class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（同じ予約番号で保存しようとした場合）"""

    pass


class DataFormatException(DomainException):
    """永続化データを解釈できない場合"""

    pass


class PersistenceException(DomainException):
    """永続化先の読み書きに失敗した場合"""

    pass
