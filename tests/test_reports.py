"""
Tests for the report catalogue, the xlsx writer and list-page exports.
"""

from openpyxl import load_workbook
import pytest

from export_tracker.reports.catalog import (
    REPORTS,
    country_wise_rows,
    export_page,
    firc_rows,
    generate_report,
    incentive_rows,
    inquiry_conversion_rows,
    lc_tracker_rows,
    list_reports,
    monthly_sales_rows,
    payment_aging_rows,
)
from export_tracker.reports.excel import EmptyExportError, MAX_COLUMN_WIDTH, column_widths, export_to_excel


class TestExcelWriter:

    def test_workbook_layout(self):
        rows = [
            {'Name': 'Al Noor', 'Amount': 1200.5},
            {'Name': 'Hamburg Chemie GmbH', 'Amount': 7},
        ]
        wb = load_workbook(export_to_excel(rows, 'Customers'))
        ws = wb['Customers']

        assert [c.value for c in ws[1]] == ['Name', 'Amount']
        assert ws['A1'].font.bold
        assert ws.freeze_panes == 'A2'
        assert ws['A3'].value == 'Hamburg Chemie GmbH'
        assert ws.column_dimensions['A'].width == len('Hamburg Chemie GmbH') + 2
        assert ws.column_dimensions['B'].width == len('Amount') + 2

    def test_width_is_capped(self):
        assert column_widths([{'Note': 'x' * 200}]) == [MAX_COLUMN_WIDTH]

    def test_none_values_count_as_empty(self):
        assert column_widths([{'LC': None}]) == [4]

    def test_empty_rows_rejected(self):
        with pytest.raises(EmptyExportError, match="No data to export"):
            export_to_excel([], 'Empty')


class TestReportBuilders:

    def test_catalogue(self):
        reports = list_reports()
        assert len(reports) == 10
        assert reports[0]['id'] == 'order-summary'
        assert set(reports[0]) == {'id', 'title', 'description', 'sheet_name'}

    def test_payment_aging_skips_received(self, db, today):
        rows = payment_aging_rows(db, today)
        assert len(rows) == 5
        by_ref = {r['Payment Ref']: r for r in rows}
        assert by_ref['PAY-0006']['Aging Bucket'] == '90+'
        assert by_ref['PAY-0002']['Outstanding'] == 11250

    def test_firc(self, db, today):
        rows = firc_rows(db, today)
        assert len(rows) == 1
        assert rows[0]['FIRC Number'] == 'FIRC-HDFC-22817'
        assert rows[0]['Net INR'] == 4377250

    def test_incentives(self, db, today):
        rows = incentive_rows(db, today)
        assert {r['Order #'][-3:] for r in rows} == {'001', '002', '005'}
        first = next(r for r in rows if r['Order #'].endswith('001'))
        assert first['Total Incentives'] == 20500

    def test_monthly_sales(self, db, today):
        rows = monthly_sales_rows(db, today)
        assert [r['Month'] for r in rows] == ['2025-01', '2025-03', '2025-04', '2025-05', '2025-06']
        april = rows[2]
        assert april['Order Count'] == 2
        assert april['Total USD'] == 42850
        assert april['Avg Order USD'] == 21425

    def test_country_wise(self, db, today):
        rows = country_wise_rows(db, today)
        assert [r['Country'] for r in rows] == ['UAE', 'Germany', 'Nigeria', 'Australia']
        uae = rows[0]
        assert uae['Total Orders'] == 3
        assert uae['Total Value (USD)'] == 89750
        assert uae['Unique Customers'] == 2
        assert uae['Avg Order Value'] == 29917

    def test_lc_tracker(self, db, today):
        rows = lc_tracker_rows(db, today)
        alerts = {r['LC Number']: (r['Days to Expiry'], r['Alert']) for r in rows}
        assert alerts == {
            'LC-ENBD-7781': (10, 'URGENT'),
            'LC-ZEN-0932': (25, 'Warning'),
            'LC-DB-5520': (-3, 'URGENT'),
        }

    def test_inquiry_conversion_joins_quotation(self, db, today):
        rows = {r['Inquiry #']: r for r in inquiry_conversion_rows(db, today)}
        assert rows['INQ-0002']['Quotation #'] == 'QT-0002'
        assert rows['INQ-0003']['Quotation #'] == '-'
        assert rows['INQ-0005']['Customer'] == ''


class TestGenerateReport:

    @pytest.mark.parametrize("report_id", sorted(REPORTS))
    def test_every_report_builds(self, db, today, report_id):
        excel_file, filename = generate_report(report_id, db, today)
        wb = load_workbook(excel_file)
        assert wb.sheetnames == [REPORTS[report_id].sheet_name]
        assert filename == f"{REPORTS[report_id].filename}.xlsx"

    def test_filename(self, db, today):
        _, filename = generate_report('payment-aging', db, today)
        assert filename == 'payment-aging-report.xlsx'

    def test_unknown_report(self, db, today):
        with pytest.raises(KeyError):
            generate_report('profit-and-loss', db, today)

    def test_empty_report(self, db, today):
        for payment in db.get_payments():
            db.delete_payment(payment['id'])
        with pytest.raises(EmptyExportError):
            generate_report('firc-report', db, today)


class TestPageExport:

    def test_orders_page_with_filter(self, db, today):
        excel_file, filename = export_page('orders', db, today, status='delivered')
        ws = load_workbook(excel_file)['Orders']

        assert filename == 'orders-2025-06-15.xlsx'
        assert ws.max_row == 3
        assert ws['A1'].value == 'Order Number'

    def test_customers_page_includes_stats(self, db, today):
        ws = load_workbook(export_page('customers', db, today, country='Germany')[0])['Customers']
        headers = [c.value for c in ws[1]]
        row = {h: c.value for h, c in zip(headers, ws[2])}
        assert row['Company'] == 'Hamburg Chemie GmbH'
        assert row['Total Orders'] == 2
        assert row['Outstanding (USD)'] == 43600

    def test_no_matches(self, db, today):
        with pytest.raises(EmptyExportError):
            export_page('shipments', db, today, search='no such vessel')

    def test_unknown_page(self, db, today):
        with pytest.raises(KeyError):
            export_page('invoices', db, today)
