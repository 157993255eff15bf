"""004: create maker_events table

Revision ID: 004
Revises: 003
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE maker_events (
            id                  BIGSERIAL       PRIMARY KEY,
            market_id           NUMERIC         NOT NULL,
            side                VARCHAR(4)      NOT NULL,
            market_order_id     NUMERIC         NOT NULL,
            user_address        VARCHAR(66)     NOT NULL,
            custodian_id        NUMERIC,
            event_type          VARCHAR(6)      NOT NULL,
            size                NUMERIC         NOT NULL,
            price               NUMERIC         NOT NULL,
            time                TIMESTAMPTZ     NOT NULL,
            created_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT fk_maker_events_market_id
                FOREIGN KEY (market_id) REFERENCES market_registration_events (market_id),
            CONSTRAINT ck_maker_events_side         CHECK (side IN ('BUY', 'SELL')),
            CONSTRAINT ck_maker_events_event_type   CHECK (
                event_type IN ('PLACE', 'FILL', 'CANCEL', 'EVICT')
            ),
            CONSTRAINT ck_maker_events_integral_ids CHECK (
                market_order_id >= 0 AND market_order_id = TRUNC(market_order_id)
                AND (custodian_id IS NULL
                     OR (custodian_id >= 0 AND custodian_id = TRUNC(custodian_id)))
            ),
            CONSTRAINT ck_maker_events_size_price_gte_0 CHECK (size >= 0 AND price >= 0)
        );
    """)
    op.execute("CREATE INDEX idx_maker_events_order ON maker_events (market_id, market_order_id);")
    op.execute("CREATE INDEX idx_maker_events_market_time ON maker_events (market_id, time);")
    op.execute("CREATE INDEX idx_maker_events_user ON maker_events (user_address, time);")
    op.execute("""
        CREATE TRIGGER trg_maker_events_append_only
            BEFORE UPDATE OR DELETE ON maker_events
            FOR EACH ROW EXECUTE FUNCTION fn_reject_mutation();
    """)
    op.execute("COMMENT ON TABLE maker_events IS 'Append-only log of maker-side order events';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS maker_events CASCADE;")
