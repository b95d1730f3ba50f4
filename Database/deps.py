from fastapi import Request

from Database.db import TicketingDB


def get_db(request: Request) -> TicketingDB:
    '''Return the storage attached to the running application.'''
    return request.app.state.db
