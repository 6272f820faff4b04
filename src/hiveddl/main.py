from fastapi import FastAPI, HTTPException

from hiveddl.router import route
from hiveddl.utils.exceptions import HiveDDLError

app = FastAPI(
    title="Hive Table Definition Writer",
    version="1.0.0"
)

@app.post("/table-ddl")
def table_ddl(payload: dict):
    try:
        return route(payload)
    except HiveDDLError as e:
        # Bad schema / options → client error, not server crash
        raise HTTPException(
            status_code=422,
            detail={
                "status": "ERROR",
                "error": type(e).__name__,
                "message": str(e),
            }
        )
