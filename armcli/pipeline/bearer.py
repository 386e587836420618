AUTHORIZATION_HEADER = "Authorization"


def create(credentials, timeout=None):
    # A token is fetched for every request; expiry is left to the issuer.
    def bearer_token_interceptor(request, call_next):
        token = credentials.retrieve_token(timeout=timeout)
        request.headers[AUTHORIZATION_HEADER] = token.authorization_header()
        return call_next(request)

    return bearer_token_interceptor
