"""003: create market_registration_events table

Revision ID: 003
Revises: 002
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE market_registration_events (
            market_id           NUMERIC         NOT NULL,
            time                TIMESTAMPTZ     NOT NULL,
            base_id             INT,
            base_name_generic   TEXT,
            quote_id            INT             NOT NULL,
            lot_size            NUMERIC         NOT NULL,
            tick_size           NUMERIC         NOT NULL,
            min_size            NUMERIC         NOT NULL,
            underwriter_id      NUMERIC         NOT NULL,
            created_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT pk_market_registration_events PRIMARY KEY (market_id),
            CONSTRAINT fk_market_registration_events_base_id
                FOREIGN KEY (base_id) REFERENCES coins (id),
            CONSTRAINT fk_market_registration_events_quote_id
                FOREIGN KEY (quote_id) REFERENCES coins (id),
            CONSTRAINT ck_market_registration_events_base_exclusive CHECK (
                (base_id IS NULL) <> (base_name_generic IS NULL)
            ),
            CONSTRAINT ck_market_registration_events_integral_ids CHECK (
                market_id >= 0 AND market_id = TRUNC(market_id)
                AND underwriter_id >= 0 AND underwriter_id = TRUNC(underwriter_id)
            ),
            CONSTRAINT ck_market_registration_events_sizes_gte_0 CHECK (
                lot_size >= 0 AND tick_size >= 0 AND min_size >= 0
            )
        );
    """)
    op.execute("CREATE INDEX idx_market_registration_events_time ON market_registration_events (time);")
    op.execute("""
        CREATE TRIGGER trg_market_registration_events_immutable
            BEFORE UPDATE OR DELETE ON market_registration_events
            FOR EACH ROW EXECUTE FUNCTION fn_reject_mutation();
    """)
    op.execute(
        "COMMENT ON TABLE market_registration_events IS "
        "'One row per market; base is either a coin (base_id) or a generic name';"
    )


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS market_registration_events CASCADE;")
