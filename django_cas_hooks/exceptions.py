class CASUsernameTaken(Exception):
    def __init__(self, username, account_id):
        super().__init__(
            'CAS username %s is already assigned to account %s' % (
                username, account_id))
        self.username = username
        self.account_id = account_id
